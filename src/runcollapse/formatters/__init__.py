from runcollapse.formatters.base import BaseFormatter, register_formatter, get_formatter, list_formatters  # noqa: F401

# Import built-in formatters to trigger registration
import runcollapse.formatters.text  # noqa: F401
import runcollapse.formatters.json  # noqa: F401
import runcollapse.formatters.table  # noqa: F401
