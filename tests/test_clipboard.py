from src import config
from src.ui.clipboard import Acknowledgement, copy_script_html


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_copy_acknowledgement_expires():
    clock = FakeClock()
    ack = Acknowledgement(clock=clock)
    assert ack.message is None

    ack.copied("Content")
    assert ack.message == "Content copied!"

    clock.now += config.COPY_ACK_SECONDS - 0.1
    assert ack.message == "Content copied!"

    clock.now += 0.2
    assert ack.message is None


def test_newer_acknowledgement_restarts_timer():
    clock = FakeClock()
    ack = Acknowledgement(seconds=config.SAVE_ACK_SECONDS, clock=clock)

    ack.show("Saved successfully")
    clock.now += 2.0
    ack.copied("Hashtags")
    clock.now += 2.0
    assert ack.message == "Hashtags copied!"


def test_copy_script_escapes_template_literal():
    html = copy_script_html("a`b ${x} \\ </script>")

    assert "a\\`b" in html
    assert "\\${x}" in html
    assert "\\\\" in html
    assert "<\\/script>" in html
    assert html.count("</script>") == 1


def test_copy_script_handles_empty_text():
    assert "writeText(``)" in copy_script_html(None)
