"""Setup script for YouTube Playlist Export."""

from setuptools import setup, find_packages

setup(
    name="playlistexport",
    version="0.1.0",
    description="Export YouTube playlists and saved playlist pages to JSON or text",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "google-api-python-client>=2.0.0",
        "google-auth-oauthlib>=0.4.0",
        "python-dotenv>=0.19.0",
        "beautifulsoup4>=4.9.0",
        "tqdm>=4.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "playlistexport=playlistexport.cli:main",
        ]
    },
)
