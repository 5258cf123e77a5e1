"""
rolodex interpreter: command-word dispatch over the resolvers.

A command line is "<word> <arguments>". The word picks a resolver (matched
case-sensitively), the remainder is resolved by it. Runtime flags:
- shell: render failures on the stderr console and return None instead of
  raising them.
- fancy: render failures inside a panel.
- colorful: style the rendered failures.
"""
import difflib
from types import MappingProxyType

from .faults import ParseFailure, UnknownCommandError, trigger
from .messages import MESSAGE_UNKNOWN_COMMAND
from .resolvers import Resolver, DeleteResolver, FindResolver, AddResolver, BookResolver, EditResolver


def _default_resolvers():
    return {
        resolver.__command__: resolver
        for resolver in (DeleteResolver(), FindResolver(), AddResolver(), BookResolver(), EditResolver())
    }


class Interpreter:
    """
    command word → resolver table.

    - Interpreter(): the default commands (delete, find, add, book, edit).
    - Interpreter({"remove": DeleteResolver(), ...}): a custom vocabulary.
    """

    def __init__(self, resolvers=None, *, shell=False, fancy=False, colorful=False):
        if resolvers is None:
            resolvers = _default_resolvers()
        if not hasattr(resolvers, "items"):
            raise TypeError("Interpreter() resolvers must be a mapping of command words to resolvers")
        for word, resolver in resolvers.items():
            if not isinstance(word, str) or not word or any(char.isspace() for char in word):
                raise ValueError(f"invalid command word: {word!r}")
            if not isinstance(resolver, Resolver):
                raise TypeError(f"resolver for {word!r} must be a Resolver, not {type(resolver).__name__}")
        self._resolvers = MappingProxyType(dict(resolvers))
        self._flags = MappingProxyType({"shell": bool(shell), "fancy": bool(fancy), "colorful": bool(colorful)})

    @property
    def resolvers(self):
        return self._resolvers

    @property
    def commands(self):
        return tuple(self._resolvers)

    @property
    def shell(self):
        return self._flags["shell"]

    @property
    def fancy(self):
        return self._flags["fancy"]

    @property
    def colorful(self):
        return self._flags["colorful"]

    def _unknown(self, word):
        if not word:
            return UnknownCommandError(
                MESSAGE_UNKNOWN_COMMAND,
                hint="available commands: %s" % ", ".join(self.commands),
            )
        if matches := difflib.get_close_matches(word, self.commands, n=1):
            hint = "did you mean %r?" % matches[0]
        else:
            hint = "available commands: %s" % ", ".join(self.commands)
        return UnknownCommandError(MESSAGE_UNKNOWN_COMMAND, hint=hint, value=word)

    def resolve(self, line, /):
        """
        resolve a full command line into an invocation.

        raises a ParseFailure, or renders it and returns None in shell mode.
        """
        if not isinstance(line, str):
            raise TypeError("Interpreter.resolve() argument must be a string")
        word, rest = (line.split(None, 1) + ["", ""])[:2]
        # keep the leading space so the first prefix starts a new word
        arguments = " " + rest
        try:
            if (resolver := self._resolvers.get(word)) is None:
                raise self._unknown(word)
            return resolver.resolve(arguments)
        except ParseFailure as fault:
            trigger(fault, **self._flags)
        return None

    def __repr__(self):
        return f"{type(self).__name__}(commands={self.commands!r}, shell={self.shell!r})"


def interpret(line, /):
    """resolve line with a default, raising interpreter."""
    return Interpreter().resolve(line)


__all__ = (
    "Interpreter",
    "interpret",
)
