"""
투표 패널 세션 분리 테스트

AppTest로 두 개의 독립된 브라우저 세션을 띄워, 한 사용자의 로그인/투표가
다른 방문자의 화면에 나타나지 않는지 확인합니다.
"""
from __future__ import annotations

from streamlit.testing.v1 import AppTest


def _vote_panel_app():
    from wrs_dashboard.data_sources import SessionStateStore
    from wrs_dashboard.ui.vote_panel import render_vote_panel
    from wrs_dashboard.voting import LocalOnlySink

    render_vote_panel(
        store=SessionStateStore(),
        sink=LocalOnlySink(),
        category="ALL",
        metric="total",
    )


def _visible_text(at: AppTest) -> list[str]:
    return [
        element.value
        for element in [*at.success, *at.info, *at.caption, *at.markdown]
    ]


def _sign_up(at: AppTest, email: str) -> AppTest:
    at.text_input(key="wrs_auth_email").input(email)
    at.text_input(key="wrs_auth_password").input("secret")
    submit = next(button for button in at.button if button.label == "Sign up (Register)")
    return submit.click().run()


def test_signed_in_session_shows_identity_and_vote():
    alice = AppTest.from_function(_vote_panel_app).run()
    _sign_up(alice, "alice@example.com")
    alice.button(key="wrs_vote_support").click().run()

    assert not alice.exception
    messages = [element.value for element in alice.success]
    assert "Logged in as **alice@example.com**." in messages
    assert any("Thank you for your support." in message for message in messages)


def test_new_session_does_not_inherit_previous_user():
    alice = AppTest.from_function(_vote_panel_app).run()
    _sign_up(alice, "alice@example.com")
    alice.button(key="wrs_vote_support").click().run()

    bob = AppTest.from_function(_vote_panel_app).run()

    assert not bob.exception
    texts = _visible_text(bob)
    assert not any("alice@example.com" in text for text in texts)
    assert not any("Your vote was recorded" in text for text in texts)
    assert any(button.label == "Sign up (Register)" for button in bob.button)
