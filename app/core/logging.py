import logging
import sys


class ContextFormatter(logging.Formatter):
    """Custom formatter that handles optional operation and space_id fields."""
    def format(self, record):
        # Add default values for operation and space_id if not present
        if not hasattr(record, 'operation'):
            record.operation = '-'
        if not hasattr(record, 'space_id'):
            record.space_id = '-'
        return super().format(record)


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(
        "%(asctime)s %(levelname)s %(name)s [op=%(operation)s space_id=%(space_id)s] - %(message)s"
    ))
    logging.basicConfig(
        level=level.upper(),
        handlers=[handler],
    )
