"""Wire field names and configuration defaults."""

# Wire field names (snake_case, as in the proto definitions)
WIRE_RULE_ID: str = "rule_id"
WIRE_MESSAGE: str = "message"
WIRE_FILE_LOCATION: str = "file_location"
WIRE_AGAINST_FILE_LOCATION: str = "against_file_location"
WIRE_ANNOTATIONS: str = "annotations"

WIRE_FILE_PATH: str = "file_path"
WIRE_SOURCE_PATH: str = "source_path"
WIRE_START_LINE: str = "start_line"
WIRE_START_COLUMN: str = "start_column"
WIRE_END_LINE: str = "end_line"
WIRE_END_COLUMN: str = "end_column"

# [tool.plugin-check] defaults
CONFIG_SECTION: str = "plugin-check"
OUTPUT_FORMATS: frozenset[str] = frozenset({"json", "text"})
DEFAULT_OUTPUT_FORMAT: str = "json"
DEFAULT_JSON_INDENT: int = 2
DEFAULT_LOG_LEVEL: str = "WARNING"

LOGGER_NAME: str = "plugin_check"
BATCH_FILE_SUFFIX: str = ".json"
