from typing import Annotated
from pydantic import AfterValidator
from pydantic.networks import validate_email


def _check_email(value: str) -> str:
    """Reject malformed addresses but keep the text as sent; lookups match it verbatim"""
    validate_email(value)
    return value


# Email checked for format and stored without normalization
SubmittedEmail = Annotated[str, AfterValidator(_check_email)]
