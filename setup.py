from setuptools import setup, find_packages

setup(
    name="jira-describer",
    version="1.0.0",
    description="Interactive Jira description builder with AI-drafted sections",
    author="Dimitar Navushtanov",
    author_email="dimitar.navushtanov@fadata.eu",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "jira_describer.configs": ["*.yml"],
        "jira_describer.prompts": ["*.txt"],
        "jira_describer.templates": ["*.yml"],
    },
    install_requires=[
        "requests",
        "typer",
        "pydantic>=2",
        "python-dotenv",
        "PyYAML",
        "rich",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "jira-describer=jira_describer.cli.main:app",
        ],
    },
    python_requires=">=3.9",
)
