import os

import yaml

from lore_parser.lexer import ARTICLES
from lore_parser.listener import NOT_UNDERSTOOD

CONFIG_PATH = "config.yaml"
DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")

DEFAULTS = {
    "grammar_file": os.path.join(DATA_DIR, "grammar.yaml"),
    "world_file": os.path.join(DATA_DIR, "world.yaml"),
    "debug_mode": False,
    "articles": list(ARTICLES),
    "not_understood": NOT_UNDERSTOOD,
}

DEFAULT_CONFIG_YAML = """
# LORE-PARSER CONFIGURATION
# -------------------------
# Leave grammar_file / world_file commented out to play the bundled demo.

# grammar_file: my_grammar.yaml
# world_file: my_world.yaml
debug_mode: false
articles: [a, an, the]
not_understood: "I don't understand."
"""


def get_config_path(path=None):
    return path or os.getenv("LORE_PARSER_CONFIG") or CONFIG_PATH


def load_config(path=None):
    """
    Loads config.yaml or creates the default one if missing.
    LORE_PARSER_DEBUG=1 in the environment (or .env) forces debug mode on.
    """
    config_path = get_config_path(path)
    if not os.path.exists(config_path):
        with open(config_path, "w") as f:
            f.write(DEFAULT_CONFIG_YAML.strip() + "\n")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    config = dict(DEFAULTS)
    config.update({key: value for key, value in data.items() if value is not None})
    if isinstance(config["articles"], str):
        config["articles"] = config["articles"].split()

    if os.getenv("LORE_PARSER_DEBUG", "").lower() in ("1", "true", "yes", "on"):
        config["debug_mode"] = True
    return config


def save_config(config, path=None):
    """Writes the settings that differ from the defaults back to disk."""
    config_path = get_config_path(path)
    data = {key: value for key, value in config.items() if DEFAULTS.get(key) != value}
    data["debug_mode"] = bool(config.get("debug_mode", False))
    with open(config_path, "w") as f:
        yaml.dump(data, f, default_flow_style=False)
    return config_path
