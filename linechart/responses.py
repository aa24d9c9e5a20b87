"""Caller-facing response bodies

Every endpoint answers with a JSON object carrying at least a "Message"
entry; failures never change the HTTP status.
"""

from linechart.models import DataResponse, LinkResponse, MessageResponse

EXPIRY_NOTICE = "The provided url will expire in 24 hours."
METHOD_NOT_IMPLEMENTED = "The used HTTP-Method is not implemented."
PONG = "Pong."
NOT_A_UUID = "The submitted argument is not an UUID. Please send a valid UUID."


def link_response(link: str) -> LinkResponse:
    return LinkResponse(Link=link, Message=EXPIRY_NOTICE)


def data_response(encoded: str, extension: str) -> DataResponse:
    return DataResponse(
        Message=(
            f"The 'Data' entry of this JSON-object contains the base64-encoded "
            f"{extension}-file data of your chart-plot."
        ),
        Data=encoded,
    )


def message_response(message: str) -> MessageResponse:
    return MessageResponse(Message=message)


def not_implemented_response() -> MessageResponse:
    return MessageResponse(Message=METHOD_NOT_IMPLEMENTED)


def not_a_uuid_response() -> MessageResponse:
    return MessageResponse(Message=NOT_A_UUID)


def not_found_response(support_email: str) -> MessageResponse:
    return MessageResponse(
        Message=(
            "The submitted UUID is either not linked to any chart or already expired. "
            f"Please contact our support via our e-mail {support_email} ."
        )
    )


def internal_error_response(code: int, support_email: str) -> MessageResponse:
    return MessageResponse(
        Message=(
            f"An internal error (errorcode {code}) has occurred. "
            f"Please contact our support via our e-mail {support_email} ."
        )
    )
