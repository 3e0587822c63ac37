from setuptools import setup, find_namespace_packages

__version__ = "1.0.0"

requirements = [
    "pydantic>=2.0,<3.0",
    "httpx",
    "dependency-injector>=4.0,<5.0",
    "inject>=5.0,<6.0",
]

setup(
    name="profile-enricher",
    version=__version__,
    packages=find_namespace_packages(include=["profile_enricher", "profile_enricher.*"]),
    package_dir={"profile_enricher": "profile_enricher"},
    install_requires=requirements,
    extras_require={
        "dev": [
            "black",
            "pylint",
            "bandit",
            "mypy",
            "autoflake",
            "coverage",
            "coverage-badge",
            "pytest",
            "pytest-mock",
            "pytest-asyncio",
        ]
    },
)
