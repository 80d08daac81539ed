"""Console app: prompt for one value per field type and print each verdict."""
import logging
import sys
from typing import TextIO

from field_factory import FIELD_TYPE_MAP, create_validator, get_prompt, get_result_label
from field_validator.validator_config import ValidatorConfig, load_config

logger = logging.getLogger(__name__)


def selected_field_types(config: ValidatorConfig) -> list[str]:
    """Field types to prompt for. Unknown names in the config are skipped."""
    if not config.fields:
        return list(FIELD_TYPE_MAP)
    selected = []
    for name in config.fields:
        if name not in FIELD_TYPE_MAP:
            logger.warning("Unknown field type in VALIDATOR_FIELDS: %s", name)
            continue
        selected.append(name)
    return selected


def _read_line(stdin: TextIO) -> str | None:
    line = stdin.readline()
    if line == "":
        return None
    return line.rstrip("\r\n")


def run(config: ValidatorConfig, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> dict[str, bool]:
    """Prompt for each selected field in turn. Stops early at end of input."""
    results: dict[str, bool] = {}
    for field_type in selected_field_types(config):
        stdout.write(f"Enter {get_prompt(field_type)}: ")
        stdout.flush()
        value = _read_line(stdin)
        if value is None:
            stdout.write("\n")
            logger.info("End of input, stopping before %s", field_type)
            break
        is_valid = create_validator(field_type).is_valid(value)
        results[field_type] = is_valid
        stdout.write(f"{get_result_label(field_type)} is valid: {str(is_valid).lower()}\n")
    return results


def main() -> int:
    config = load_config()
    logging.basicConfig(level=config.log_level)
    run(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
