"""Editor configuration."""

from dataclasses import dataclass

RESERVED_LABEL = "networkID"

PARSE_ERROR_MESSAGE = (
    "Error parsing alert expression. You can still edit this using the "
    "advanced editor, but you won't be able to use the UI expression editor."
)


@dataclass(frozen=True)
class EditorConfig:
    """Configuration options for an ExpressionEditor.

    Attributes:
        threshold_editor_enabled: Whether the simple threshold editor is
            offered at all. When False the editor starts in advanced mode.
        reserved_label: Label injected by the server to scope a rule to one
            network. It is stripped from thresholds shown to the user.
        parse_error_message: Warning emitted when an expression cannot be
            parsed.
    """

    threshold_editor_enabled: bool = True
    reserved_label: str = RESERVED_LABEL
    parse_error_message: str = PARSE_ERROR_MESSAGE
