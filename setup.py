# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="fileaudit",
    version="1.0.0",
    description="Interactive HTML report of files created or modified within a recent time window",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["fileaudit", "fileaudit.*"]),
    package_data={
        "fileaudit.core.report": ["templates/*.j2", "templates/*.css", "templates/*.js"],
    },
    python_requires=">=3.9",
    install_requires=[
        "Jinja2>=3.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'fileaudit=fileaudit.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
