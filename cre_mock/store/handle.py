"""Atomically replaceable reference to the current generation."""

import logging
import threading
from typing import Callable

from cre_mock.exceptions import RegenerationError
from cre_mock.store.cre import Generation

logger = logging.getLogger(__name__)


class StoreHandle:
    """Holds the generation every request reads from.

    Readers call :meth:`snapshot` once and work on the returned
    :class:`Generation` for the rest of the request. :meth:`regenerate`
    builds the replacement completely before swapping the reference, so a
    reader sees either the old or the new generation, never a mix.

    Parameters
    ----------
    factory : Callable[[], Generation]
        Builds a fresh generation (normally ``CreMarketScenario.generate_generation``).
    initial : Generation | None
        Generation to start with. Built with ``factory`` when omitted.
    """

    def __init__(
        self,
        factory: Callable[[], Generation],
        initial: Generation | None = None,
    ) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._current = initial if initial is not None else factory()

    def snapshot(self) -> Generation:
        """Return the current generation."""
        return self._current

    def regenerate(self) -> Generation:
        """Replace the whole dataset with a freshly generated one.

        Returns
        -------
        Generation
            The new current generation.

        Raises
        ------
        RegenerationError
            If building the new generation fails. The previous generation
            stays current.
        """
        with self._lock:
            try:
                generation = self._factory()
            except Exception as exc:
                logger.exception("Dataset regeneration failed")
                raise RegenerationError("Failed to regenerate mock data.") from exc
            self._current = generation

        logger.info("Dataset regenerated: %s", generation.summary())
        return generation
