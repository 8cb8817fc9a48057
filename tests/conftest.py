"""Global pytest fixtures for SMART WALLET."""

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.datagen",
]
