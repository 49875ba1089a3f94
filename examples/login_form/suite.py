"""Login form exercised against the stub host.

Run with::

    hookscope run --suite examples/login_form/suite.py --config examples/login_form/hookscope.yaml
"""
from __future__ import annotations

from hookscope.core.models import Measurement, Viewport
from hookscope.hosts import HookStore, NativeStubElement, StubElement, StubHost


class LoginApp:
    """Minimal app: typing an email and pressing submit mounts a welcome banner."""

    def __init__(self, store: HookStore) -> None:
        self.store = store
        self.email = ""
        store.add("LoginScreen.EmailInput", StubElement(props={"on_change_text": self._set_email}))
        store.add("LoginScreen.SubmitButton", StubElement(props={"on_press": self._submit}))
        store.add(
            "LoginScreen.Logo",
            NativeStubElement(geometry=Measurement(0, 0, 120, 40, 20, 60)),
        )

    def _set_email(self, text: str) -> None:
        self.email = text

    def _submit(self) -> None:
        if "@" in self.email:
            self.store.add_later("WelcomeScreen.Banner", StubElement(), delay_ms=100)


def create_host() -> StubHost:
    host = StubHost(viewport=Viewport.of_size(375, 667))
    host.app = LoginApp(host.registry)
    return host


def login_spec(spec) -> None:
    def body(group) -> None:
        async def shows_logo() -> None:
            await spec.is_fully_visible("LoginScreen.Logo")

        async def logs_in() -> None:
            await spec.fill_in("LoginScreen.EmailInput", "ada@example.com")
            await spec.press("LoginScreen.SubmitButton")
            await spec.exists("WelcomeScreen.Banner")

        group.it("shows the logo", shows_logo)
        group.it("logs in with a valid email", logs_in)

    spec.describe("Login", body)


def broken_spec(spec) -> None:
    def body(group) -> None:
        async def missing_banner() -> None:
            await spec.exists("SettingsScreen.Banner")

        async def equal_values() -> None:
            await spec.assert_equal(1, 1)

        group.it("finds a screen that never renders", missing_banner)
        group.it("compares equal values", equal_values)

    spec.describe("Broken", body)


SPECS = [login_spec]
FAILING_SPECS = [login_spec, broken_spec]
