"""
utils/config.py - Run Configuration

Wraps a ConfigParser so the rest of the code reads typed attributes
instead of raw section/key strings.
"""

DEFAULT_STYLESHEETS = [
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/"
    "projects/tag-cloud-generator/data/tagcloud.css",
    "tagcloud.css",
]


class Config(object):
    """Typed view over config.ini. Missing sections fall back to defaults."""

    def __init__(self, config):
        font = config["FONT"] if config.has_section("FONT") else {}
        cloud = config["CLOUD"] if config.has_section("CLOUD") else {}
        output = config["OUTPUT"] if config.has_section("OUTPUT") else {}

        self.min_font = int(font.get("MINFONT", 10))
        self.max_font = int(font.get("MAXFONT", 48))
        self.zero_floor = str(font.get("ZEROFLOOR", "false")).strip().lower() \
            in {"1", "true", "yes", "on"}
        self.default_size = int(cloud.get("DEFAULTSIZE", 100))

        stylesheets = output.get("STYLESHEETS")
        if stylesheets is None:
            self.stylesheets = list(DEFAULT_STYLESHEETS)
        else:
            self.stylesheets = [s.strip() for s in stylesheets.split(",") if s.strip()]

        if self.min_font > self.max_font:
            raise ValueError(
                f"MINFONT ({self.min_font}) must not exceed MAXFONT ({self.max_font})")
