pytest_plugins = ["droptrack.testing.fixtures", "pytester"]
