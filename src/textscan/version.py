from importlib.metadata import PackageNotFoundError, version

try:
    version = version("TextScan")
except PackageNotFoundError:
    version = "0.0.0"
