from setuptools import setup, find_packages

setup(
    name="nvr_check",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "httpx>=0.24.0",
        "aiofiles>=23.1.0",
        "pydantic>=2.11",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
            "respx>=0.20",
        ],
    },
    entry_points={
        "console_scripts": [
            "nvr-check=nvr_check.__main__:main_entry",
        ],
    },
    python_requires=">=3.10",
    description="Verifies that an NVR reports the expected cameras and snapshots their connection state",
    keywords="nvr, camera, provisioning, avigilon",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: System Administrators",
        "Programming Language :: Python :: 3",
    ],
)
