# hvswitch_core/errors.py


class HvSwitchError(Exception):
    """Base class for provisioning failures surfaced to the operator."""


class InputError(HvSwitchError, ValueError):
    """Operator input could not be coerced to the expected type."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"{field}: '{value}' is not an integer")


class HostCommandError(HvSwitchError, RuntimeError):
    """A host networking cmdlet failed or could not be started."""

    def __init__(self, command: str, returncode: int | None, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr.strip()
        detail = self.stderr or "no error output"
        if returncode is None:
            message = f"could not run `{command}`: {detail}"
        else:
            message = f"`{command}` exited with status {returncode}: {detail}"
        super().__init__(message)
