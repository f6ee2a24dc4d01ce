"""Running machines against an instance context."""

from typing import Any, Iterable, Iterator, Optional

from mealy.machine.types import State, MachineDefinition
from mealy.machine.engine import Runner


class Mealy:
    """
    Base class for machines whose actions work on instance attributes.

    Subclasses set `definition`, built from actions written as plain
    functions taking the instance first:

        builder = MachineBuilder('counter')

        @builder.on_start('start')
        def reset(self, emit):
            self.count = 0

        class Counter(Mealy):
            definition = builder.build()

    Each call to `run` or `execute` allocates fresh run state.
    """

    definition: MachineDefinition
    logger: Any = None

    _runner: Optional[Runner] = None

    @property
    def state(self) -> Optional[State]:
        """The current state of the most recent run, if any."""
        if self._runner is None:
            return None
        return self._runner.state

    def run(self, tokens: Iterable[Any]) -> Iterator[Any]:
        """Stream the tokens emitted by this machine's actions."""
        return self._new_runner().run(tokens)

    def execute(self, tokens: Iterable[Any]) -> Any:
        """Run over `tokens` and return the result of the finish action."""
        return self._new_runner().execute(tokens)

    def _new_runner(self) -> Runner:
        self._runner = Runner(self.definition, context=self, logger=self.logger)
        return self._runner
