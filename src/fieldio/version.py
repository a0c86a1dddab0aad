from importlib.metadata import PackageNotFoundError, version

try:
    version = version("FieldIO")
except PackageNotFoundError:
    version = "0.0.0"
