from wolfcast import padtest


class FakePad:
    def __init__(self, buttons=13, pressed=(), axes=(0.0,) * 6, hat=(0, 0), hats=1):
        self.buttons = buttons
        self.pressed = set(pressed)
        self.axes = list(axes)
        self.hat = hat
        self.hats = hats

    def get_numbuttons(self):
        return self.buttons

    def get_button(self, index):
        return int(index in self.pressed)

    def get_numaxes(self):
        return len(self.axes)

    def get_axis(self, index):
        return self.axes[index]

    def get_numhats(self):
        return self.hats

    def get_hat(self, index):
        return self.hat


def _lines(text):
    return text.splitlines()


def test_no_controller():
    assert padtest.describe_controller(None) == "Controller Status:\nNo controller connected"


def test_line_order_and_labels():
    lines = _lines(padtest.describe_controller(FakePad()))
    prefixes = [
        "Controller Status:",
        "Connected - ",
        "ID of button(s) pressed : ",
        "Arrows : ",
        "Left joystick : ",
        "Central Buttons : ",
        "Right joystick : ",
        "Buttons : ",
        "Triggers Up : ",
        "Triggers Down : ",
    ]
    assert len(lines) == len(prefixes)
    for line, prefix in zip(lines, prefixes):
        assert line.startswith(prefix)


def test_button_count_and_pressed_ids():
    text = padtest.describe_controller(FakePad(buttons=13, pressed=(0, 7)))
    lines = _lines(text)
    assert lines[1] == "Connected - 13 buttons"
    assert "ID of button(s) pressed : 0 7 \n" in text


def test_idle_pad_reads_zero():
    lines = _lines(padtest.describe_controller(FakePad()))
    assert lines[3] == "Arrows : PovX=0, PovY=0"
    assert lines[4] == "Left joystick : X=0.0, Y=0.0, L3=0"
    assert lines[9] == "Triggers Down : L2=0.0, R2=0.0"


def test_face_and_shoulder_buttons():
    pad = FakePad(pressed=(padtest.BUTTON_A, padtest.BUTTON_X, padtest.BUTTON_R1))
    lines = _lines(padtest.describe_controller(pad))
    assert lines[7] == "Buttons : A=1, B=0, Y=0, X=1"
    assert lines[8] == "Triggers Up : L1=0, R1=1"


def test_axes_are_scaled_to_percent():
    axes = [1.0, -1.0, 0.0, 0.0, 0.0, 1.0]
    lines = _lines(padtest.describe_controller(FakePad(axes=axes)))
    assert lines[4] == "Left joystick : X=100.0, Y=-100.0, L3=0"
    assert lines[9].endswith("R2=100.0")


def test_buttons_beyond_count_read_released():
    pad = FakePad(buttons=4, pressed=(padtest.BUTTON_L3, padtest.BUTTON_PS))
    lines = _lines(padtest.describe_controller(pad))
    assert lines[2] == "ID of button(s) pressed : "
    assert "L3=0" in lines[4]
    assert "PS=0" in lines[5]


def test_missing_axes_and_hat_read_zero():
    pad = FakePad(axes=(), hats=0, hat=(1, 1))
    lines = _lines(padtest.describe_controller(pad))
    assert lines[3] == "Arrows : PovX=0, PovY=0"
    assert lines[6].startswith("Right joystick : X=0.0, Y=0.0")


def test_help_flag_prints_help(capsys):
    assert padtest.main(["-h"]) == 0
    assert capsys.readouterr().out == padtest.help_text()


def test_each_help_flag_prints_once(capsys):
    assert padtest.main(["-h", "-h"]) == 0
    assert capsys.readouterr().out == padtest.help_text() * 2


def test_help_text_content():
    text = padtest.help_text()
    assert "=== Controller Test Help ===" in text
    assert "This program is made to test the output of your controller." in text
    assert "wolfcast.padtest" in text