from setuptools import setup, find_namespace_packages

setup(
    name="seedtotp",
    version="1.0.0",
    packages=find_namespace_packages(include=["seedtotp", "seedtotp.*"]),
    python_requires=">=3.8",
    install_requires=[
        "cryptography>=3.4",
        "keyring>=23.0",
        "python-dotenv>=0.19",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "seedtotp = seedtotp.client.cli:main",
        ],
    },
    description="RFC 6238 TOTP codes from a stored Base32 seed"
)
