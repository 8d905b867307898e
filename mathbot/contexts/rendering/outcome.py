"""
Render outcomes.

A render attempt ends in exactly one of three shapes. Each is its own frozen
dataclass so callers can branch with isinstance() and never see two fields
populated at once.
"""

from dataclasses import dataclass
from typing import Optional, Union

GENERIC_ERROR_MESSAGE = "An Error occured. Please contact the bot developer."
ARTIFACT_FILENAME = "rendered.png"


@dataclass(frozen=True)
class Artifact:
    """
    Successful render.

    Attributes:
        data: Exact bytes the compiler wrote to the output path
        filename: Attachment name used when replying
    """

    data: bytes
    filename: str = ARTIFACT_FILENAME

    is_success = True

    @property
    def user_message(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class InputError:
    """
    The compiler ran and rejected the document.

    Attributes:
        message: First line of the compiler's stderr (may be empty)
    """

    message: str

    is_success = False

    @property
    def user_message(self) -> str:
        return self.message


@dataclass(frozen=True)
class InfrastructureError:
    """
    The render could not be carried out (workspace, spawn, timeout, missing output).

    Attributes:
        detail: Operator-facing description. Logged, never shown to users.
    """

    detail: str

    is_success = False

    @property
    def user_message(self) -> str:
        return GENERIC_ERROR_MESSAGE


RenderOutcome = Union[Artifact, InputError, InfrastructureError]
