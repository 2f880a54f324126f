"""Setup script for the trackdraw NMEA package."""

from setuptools import setup, find_namespace_packages

requires = ["click>=8.0"]

__version__ = None
exec(open("src/trackdraw/nmea/version.py").read())

setup(
    name="trackdraw-nmea",
    version=__version__,
    description="NMEA-0183 sentence codec and GPS track converter",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages("src", include=["trackdraw.*"]),
    include_package_data=True,
    install_requires=requires,
    extras_require={"test": ["pytest>=7.0", "pynmea2>=1.19"]},
    entry_points={"console_scripts": ["nmea-track = trackdraw.nmea.cli:main"]},
)
