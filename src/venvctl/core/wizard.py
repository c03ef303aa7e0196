"""Step-by-step environment creation

The wizard is a state machine: ``prompt(state)`` says what to ask next and
``advance(state, answer)`` returns the next state. Terminal I/O stays with
the caller, which supplies answers through ``run(ask)``.
"""

import os
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, Tuple

from .catalog import VersionCatalog
from .config import Configuration
from .exceptions import InvalidSelectionError, NotFoundError
from .models import CreationRequest, VersionEntry
from .utils import split_packages

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


class WizardStep(str, Enum):
    NAME = "name"
    OVERWRITE = "overwrite"
    VERSION = "version"
    PACKAGES = "packages"
    ACTIVATE = "activate"
    DONE = "done"
    ABORTED = "aborted"


@dataclass(frozen=True)
class WizardState:
    step: WizardStep = WizardStep.NAME
    name: str = ""
    force: bool = False
    entries: Tuple[VersionEntry, ...] = ()
    version: Optional[str] = None
    extra_packages: Tuple[str, ...] = ()
    activate: bool = True

    @property
    def finished(self) -> bool:
        return self.step in (WizardStep.DONE, WizardStep.ABORTED)


@dataclass(frozen=True)
class Prompt:
    step: WizardStep
    text: str
    default: str = ""
    options: Tuple[VersionEntry, ...] = ()


def parse_yes_no(answer: str, default: bool) -> Optional[bool]:
    """Interpret a yes/no answer, None when it is neither"""
    answer = answer.strip().lower()
    if not answer:
        return default
    if answer in YES_ANSWERS:
        return True
    if answer in NO_ANSWERS:
        return False
    return None


class InteractiveWizard:
    """Collect a CreationRequest from a sequence of answers"""

    def __init__(
        self,
        config: Configuration,
        catalog: VersionCatalog,
        exists: Callable[[str], bool] = os.path.exists,
    ):
        self.config = config
        self.catalog = catalog
        self.exists = exists

    def start(self) -> WizardState:
        return WizardState(name=self.config.env_name)

    def prompt(self, state: WizardState) -> Prompt:
        """Describe the question for the current step"""
        if state.step == WizardStep.NAME:
            return Prompt(
                state.step, "Environment directory", default=self.config.env_name
            )
        if state.step == WizardStep.OVERWRITE:
            return Prompt(
                state.step,
                f"Environment {state.name} already exists. Overwrite?",
                default="n",
            )
        if state.step == WizardStep.VERSION:
            return Prompt(
                state.step,
                "Select Python version",
                default="1",
                options=state.entries,
            )
        if state.step == WizardStep.PACKAGES:
            return Prompt(
                state.step, "Extra packages (space separated)", default=""
            )
        if state.step == WizardStep.ACTIVATE:
            return Prompt(state.step, "Activate after creation?", default="y")
        raise ValueError(f"Wizard has no prompt for step {state.step}")

    def _enter_version_step(self, state: WizardState) -> WizardState:
        entries = tuple(self.catalog.enumerate())
        if not entries:
            raise NotFoundError("no python interpreter available")
        return replace(state, step=WizardStep.VERSION, entries=entries)

    def advance(self, state: WizardState, answer: str) -> WizardState:
        """
        Apply an answer to the current step

        Raises:
            InvalidSelectionError: Version choice is not a menu number
            NotFoundError: No interpreter versions are available
        """
        answer = (answer or "").strip()

        if state.step == WizardStep.NAME:
            state = replace(state, name=answer or self.config.env_name)
            if self.exists(state.name):
                return replace(state, step=WizardStep.OVERWRITE)
            return self._enter_version_step(state)

        if state.step == WizardStep.OVERWRITE:
            overwrite = parse_yes_no(answer, default=False)
            if overwrite is None:
                return state
            if not overwrite:
                return replace(state, step=WizardStep.ABORTED)
            return self._enter_version_step(replace(state, force=True))

        if state.step == WizardStep.VERSION:
            entry = self.select(state.entries, answer or "1")
            return replace(
                state, step=WizardStep.PACKAGES, version=entry.identifier
            )

        if state.step == WizardStep.PACKAGES:
            return replace(
                state,
                step=WizardStep.ACTIVATE,
                extra_packages=tuple(split_packages(answer)),
            )

        if state.step == WizardStep.ACTIVATE:
            activate = parse_yes_no(answer, default=True)
            if activate is None:
                return state
            return replace(state, step=WizardStep.DONE, activate=activate)

        raise ValueError(f"Wizard is already finished ({state.step})")

    @staticmethod
    def select(entries, answer: str) -> VersionEntry:
        """Pick a 1-indexed menu entry"""
        try:
            index = int(answer)
        except ValueError:
            raise InvalidSelectionError(
                f"Invalid selection: {answer}",
                details=f"Enter a number between 1 and {len(entries)}",
            ) from None
        if not 1 <= index <= len(entries):
            raise InvalidSelectionError(
                f"Invalid selection: {answer}",
                details=f"Enter a number between 1 and {len(entries)}",
            )
        return entries[index - 1]

    def request(self, state: WizardState) -> CreationRequest:
        if state.step != WizardStep.DONE:
            raise ValueError("Wizard is not finished")
        return CreationRequest(
            name=state.name,
            version=state.version,
            force=state.force,
            activate=state.activate,
            install_base=True,
            extra_packages=list(state.extra_packages),
        )

    def run(self, ask: Callable[[Prompt], str]) -> Optional[CreationRequest]:
        """
        Drive the wizard to completion

        Args:
            ask: Called with each prompt, returns the user's answer

        Returns:
            The request, or None if the user declined to overwrite
        """
        state = self.start()
        while not state.finished:
            state = self.advance(state, ask(self.prompt(state)))
        if state.step == WizardStep.ABORTED:
            return None
        return self.request(state)
