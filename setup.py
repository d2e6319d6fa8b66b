from setuptools import setup, find_packages

setup(
    name="mentorlink",
    version="0.1",
    packages=find_packages(include=["app", "app.*"]),
    include_package_data=True,
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy",
        "psycopg2-binary",
        "python-jose[cryptography]",
        "passlib[bcrypt]",
        "bcrypt<5",
        "pydantic[email]",
        "pydantic-settings",
        "python-dotenv",
        "alembic"
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
)
