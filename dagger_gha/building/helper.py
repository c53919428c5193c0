import importlib.resources as pkg_resources
from functools import lru_cache


@lru_cache(maxsize=None)
def get_script(file: str) -> str:
    """Returns the contents of a script shipped in dagger_gha.resources."""
    script_path = pkg_resources.files("dagger_gha.resources").joinpath(file)
    with script_path.open("r", encoding="utf-8") as f:
        return f.read()
