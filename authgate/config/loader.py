import yaml
from pathlib import Path


def load_options_yaml(path) -> dict:
    """
    Load gate options from a YAML file.

    The file holds the same keys accepted as overrides, e.g.

        login_path: /login
        auth0:
          client_id: my-client

    Example:
        options = load_options_yaml("config/auth.yaml")
    """
    with open(Path(path), "r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Gate options in {path} must be a mapping, got {type(data).__name__}")
    return data
