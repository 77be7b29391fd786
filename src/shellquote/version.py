from importlib.metadata import PackageNotFoundError, version

try:
    version = version("ShellQuote")
except PackageNotFoundError:
    version = "0.0.0"
