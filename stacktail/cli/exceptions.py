import typing as t

import click
from click import ClickException

from stacktail.exceptions import ProviderError, TailError

# provider error codes caused by missing, wrong or expired credentials
CREDENTIAL_ERROR_CODES = (
    "AccessDenied",
    "ExpiredToken",
    "InvalidClientTokenId",
    "SignatureDoesNotMatch",
    "UnrecognizedClientException",
)


class CLIError(ClickException):
    """An error printed in red to stderr, ending the command with exit code 1."""

    @classmethod
    def from_tail_error(cls, error: TailError) -> "CLIError":
        """
        Creates the error shown for a failed tailing run. Provider errors already name the failed operation and the
        provider's error code, credential problems additionally get a hint on how to select other credentials.
        """
        message = error.message
        if isinstance(error, ProviderError) and error.code in CREDENTIAL_ERROR_CODES:
            message += "\nCheck the credentials in use, or select others with --profile or --key/--secret."
        return cls(message)

    def format_message(self) -> str:
        return click.style(f"❌ Error: {self.message}", fg="red")

    def show(self, file: t.Optional[t.IO[t.Any]] = None) -> None:
        click.echo(self.format_message(), file=file, err=file is None)
