"""
Classification of field validation errors into error codes.

The code is derived from the text of the first error message by keyword,
so the wording of field labels in messages is load-bearing. Only the label
part of a message is searched: everything from the first double quote on
is the scanned value and is ignored.
"""

from qrgate.core.models import QRErrorCode

# Checked in order, case-sensitive; first match wins
ERROR_CODE_KEYWORDS: tuple[tuple[QRErrorCode, tuple[str, ...]], ...] = (
    (QRErrorCode.INVALID_EVENTO, ("Event", "Evento")),
    (QRErrorCode.INVALID_UBICACION, ("Location", "Ubicación")),
    (QRErrorCode.INVALID_ZONA, ("Zone", "Zona")),
    (QRErrorCode.INVALID_FECHA, ("Date", "date", "Fecha")),
    (QRErrorCode.INVALID_HORA, ("Time", "time", "Hora")),
    (QRErrorCode.INVALID_BRAZALETE, ("Wristband", "brazalete")),
)

VALUE_QUOTE = '"'


def derive_error_code(error_message: str | None) -> QRErrorCode:
    """
    Map a validation error message to an error code.

    Args:
        error_message: The first error reported by validation

    Returns:
        The code of the first keyword group found in the message label,
        or INVALID_FORMAT when none matches
    """
    if not error_message:
        return QRErrorCode.INVALID_FORMAT

    label_part = error_message.split(VALUE_QUOTE, 1)[0]
    for code, keywords in ERROR_CODE_KEYWORDS:
        if any(keyword in label_part for keyword in keywords):
            return code

    return QRErrorCode.INVALID_FORMAT
