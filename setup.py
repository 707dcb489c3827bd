# setup.py
# Version: 1.0.0

import os
from setuptools import setup, find_packages

setup(
    name="simple_gpio",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        'PyYAML',
        'termcolor'
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'simple-gpio=simple_gpio.main:main',
        ],
    },
    description="Single GPIO pin control over the Linux sysfs interface",
    long_description=open('README.md').read() if os.path.exists('README.md') else '',
    long_description_content_type="text/markdown",
    keywords="gpio, sysfs, raspberry-pi, linux",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
)
