import os
from dotenv import load_dotenv


LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


def load_configuration():
    load_dotenv()
    config = {
        'LOG_LEVEL': os.getenv('GIT_INFO_LOG_LEVEL', 'WARNING').upper(),
        'GIT_EXECUTABLE': os.getenv('GIT_INFO_GIT_EXECUTABLE', 'git'),
    }

    if config['LOG_LEVEL'] not in LOG_LEVELS:
        raise ValueError(f"Invalid GIT_INFO_LOG_LEVEL: {config['LOG_LEVEL']}")

    return config


PREPROCESSOR_NAME = "git-info"
SUPPORTED_RENDERERS = {"html"}
TARGET_MDBOOK_VERSION = "0.4.40"
DEFAULT_BOOK_SRC = "src"
# Quoted "<author>\t<strict ISO-8601 author date>", one line per commit
LOG_FORMAT = '--pretty="%an%x09%aI"'
DATE_FORMAT = "%d %b %Y"
NOT_AVAILABLE = "n/a"
CONTRIBUTOR_SEPARATOR = "<br>"
