from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WizardSessionKeys:
    """Namespaced session-state keys for one wizard instance."""

    wizard_id: str = "intake"

    @property
    def prefix(self) -> str:
        return f"wiz:{self.wizard_id}:"

    def namespace(self, key: str) -> str:
        return f"{self.prefix}{key}"

    @property
    def controller(self) -> str:
        return self.namespace("controller")

    @property
    def last_request(self) -> str:
        return self.namespace("last_request")

    def widget(self, step: str, field: str) -> str:
        """Return the widget key for ``field`` rendered on ``step``."""

        return self.namespace(f"{step}:{field}")
