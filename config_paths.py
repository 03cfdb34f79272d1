import json
import logging
import os

logger = logging.getLogger(__name__)

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "pagebar")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
ITEMS_PER_PAGE_DEFAULT = None
SIBLING_COUNT_DEFAULT = 2


def _valid_int(value, minimum):
    return isinstance(value, int) and not isinstance(value, bool) and value >= minimum


def load_config():
    cfg = {
        "ITEMS_PER_PAGE": ITEMS_PER_PAGE_DEFAULT,
        "SIBLING_COUNT": SIBLING_COUNT_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_JSON, exc)
        return cfg

    section = data.get("pagination") if isinstance(data, dict) else None
    if not isinstance(section, dict):
        return cfg

    per_page = section.get("items_per_page")
    if _valid_int(per_page, 1):
        cfg["ITEMS_PER_PAGE"] = per_page
    elif per_page is not None:
        logger.warning("ignoring invalid items_per_page %r in %s", per_page, CONFIG_JSON)

    siblings = section.get("sibling_count")
    if _valid_int(siblings, 0):
        cfg["SIBLING_COUNT"] = siblings
    elif siblings is not None:
        logger.warning("ignoring invalid sibling_count %r in %s", siblings, CONFIG_JSON)

    return cfg
