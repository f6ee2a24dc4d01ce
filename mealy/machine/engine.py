"""Execution of machine definitions over token streams."""

import contextlib
from typing import Any, List, Tuple, Iterable, Iterator, Optional, Generator

from mealy.machine.types import Action, MachineDefinition
from mealy.machine.lookup import lookup
from mealy.machine.exceptions import UnexpectedToken

RUN = 'run'
EXECUTE = 'execute'


class EmitBuffer:
    """
    Output collected from a single action invocation.

    Once closed, further calls are ignored so an emitter kept past the end
    of its action cannot leak tokens into a later transition.
    """

    def __init__(self) -> None:
        self._tokens: List[Any] = []
        self._open = True

    def __call__(self, token: Any) -> None:
        if self._open:
            self._tokens.append(token)

    def close(self) -> List[Any]:
        """Stop collecting and hand back what was emitted, in order."""
        self._open = False
        tokens, self._tokens = self._tokens, []
        return tokens


def discard(token: Any) -> None:
    """Emitter used where output is not collected."""
    pass


class Runner:
    """
    Per-run state for one machine definition.

    Tracks the current state; the definition itself is never modified, so
    any number of runners may share it.
    """

    def __init__(
        self,
        definition: MachineDefinition,
        *,
        context: Any = None,
        logger: Any = None,
    ) -> None:
        self.definition = definition
        self.context = context
        self.logger = logger
        self.state = definition.start.state

    def run(self, tokens: Iterable[Any]) -> Iterator[Any]:
        """
        Lazily yield every emitted token.

        Input is only pulled from `tokens` as the output is consumed.
        """
        with contextlib.closing(self._steps(tokens, collect=True)) as steps:
            for emitted in steps:
                yield from emitted

    def execute(self, tokens: Iterable[Any]) -> Any:
        """Run to completion, ignoring emits. Returns the finish result."""
        steps = self._steps(tokens, collect=False)
        while True:
            try:
                next(steps)
            except StopIteration as e:
                return e.value

    def _steps(
        self,
        tokens: Iterable[Any],
        *,
        collect: bool,
    ) -> Generator[List[Any], None, Any]:
        definition = self.definition
        mode = RUN if collect else EXECUTE

        with self._process_run(mode):
            self.state = definition.start.state
            _, emitted = self._invoke(definition.start.action, (), collect)
            yield emitted

            for token in tokens:
                try:
                    rule = lookup(definition.transitions, self.state, token)
                except UnexpectedToken as e:
                    if self.logger is not None:
                        self.logger.unexpected_token(definition, e)
                    raise

                from_state, self.state = self.state, rule.target
                if self.logger is not None:
                    self.logger.transition(
                        definition,
                        token,
                        from_state,
                        self.state,
                    )

                _, emitted = self._invoke(
                    rule.action,
                    (token, from_state, self.state),
                    collect,
                )
                yield emitted

            result, emitted = self._invoke(definition.finish, (), collect)
            yield emitted

        return result

    def _invoke(
        self,
        action: Optional[Action],
        args: Tuple[Any, ...],
        collect: bool,
    ) -> Tuple[Any, List[Any]]:
        if action is None:
            return None, []

        emit = EmitBuffer() if collect else discard
        if self.context is not None:
            result = action(self.context, emit, *args)
        else:
            result = action(emit, *args)

        return result, emit.close() if collect else []

    def _process_run(self, mode: str):
        if self.logger is None:
            return contextlib.nullcontext()
        return self.logger.process_run(self.definition, mode)


def run(
    definition: MachineDefinition,
    tokens: Iterable[Any],
    *,
    context: Any = None,
    logger: Any = None,
) -> Iterator[Any]:
    """Stream the tokens emitted by running `definition` over `tokens`."""
    return Runner(definition, context=context, logger=logger).run(tokens)


def execute(
    definition: MachineDefinition,
    tokens: Iterable[Any],
    *,
    context: Any = None,
    logger: Any = None,
) -> Any:
    """Run `definition` over `tokens` and return the finish action's result."""
    return Runner(definition, context=context, logger=logger).execute(tokens)
