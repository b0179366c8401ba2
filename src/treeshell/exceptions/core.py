"""
Exception classes for treeshell command processing.

This module defines specific exception types for the two tiers of failure
in the interpreter: syntax errors raised while a line is tokenized and
parsed, and node errors raised by the in-memory node store.
"""


class TreeShellError(Exception):
    """Base exception for all treeshell errors."""

    pass


class CommandSyntaxError(TreeShellError):
    """Base exception for errors raised while parsing a command line.

    Any syntax error rejects the whole line: none of its commands execute.
    """

    pass


class CommandNotProvidedError(CommandSyntaxError):
    """Raised when a line contains no tokens at all."""

    def __init__(self):
        super().__init__("No command provided")


class InvalidCommandError(CommandSyntaxError):
    """Raised when a line does not start with a known command keyword."""

    def __init__(self, token: str):
        """
        Initialize the exception.

        Params:
            token: Text of the token found where a command was expected
        """
        self.token = token
        super().__init__(f"Invalid command: '{token}' is not a known command")


class InvalidPathError(CommandSyntaxError):
    """Raised when a path argument has malformed dot or extension usage."""

    def __init__(self, reason: str):
        """
        Initialize the exception.

        Params:
            reason: Why the path is invalid
        """
        self.reason = reason
        super().__init__(f"Invalid path: {reason}")


class UnexpectedTokenError(CommandSyntaxError):
    """Raised when a token is not allowed to follow the previous token."""

    def __init__(self, token: str, previous: str | None = None):
        """
        Initialize the exception.

        Params:
            token: Text of the offending token
            previous: Text of the token it followed, if any
        """
        self.token = token
        self.previous = previous
        if previous is None:
            message = f"Unexpected token '{token}'"
        else:
            message = f"Unexpected token '{token}' after '{previous}'"
        super().__init__(message)


class InvalidArgumentsError(CommandSyntaxError):
    """Raised when a command receives the wrong number of arguments."""

    def __init__(self, command: str, count: int, expected: str):
        """
        Initialize the exception.

        Params:
            command: Name of the command being built
            count: Number of arguments supplied
            expected: Human readable description of the accepted arity
        """
        self.command = command
        self.count = count
        self.expected = expected
        super().__init__(
            f"{command}: expected {expected} argument(s), got {count}"
        )


class InvalidTypeError(CommandSyntaxError):
    """Raised when an argument has the wrong kind or path shape for a command."""

    def __init__(self, command: str, reason: str):
        """
        Initialize the exception.

        Params:
            command: Name of the command being built
            reason: What was wrong with the argument
        """
        self.command = command
        self.reason = reason
        super().__init__(f"{command}: {reason}")


class NodeError(TreeShellError):
    """Base exception for node store failures."""

    pass


class NodeTypeError(NodeError):
    """Raised when a child is added to a node that cannot hold children."""

    def __init__(self, name: str | None):
        """
        Initialize the exception.

        Params:
            name: Name of the node that rejected the child
        """
        self.name = name
        super().__init__(f"Cannot add children to file '{name}'")


class NodeNotFoundError(NodeError):
    """Raised when a name lookup or a path resolution finds nothing."""

    def __init__(self, name: str):
        """
        Initialize the exception.

        Params:
            name: The name (or path segment) that could not be found
        """
        self.name = name
        super().__init__(f"No such file or directory: {name}")
