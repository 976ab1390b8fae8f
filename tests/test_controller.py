import pytest

from minigin.controller import Controller, ControllerButton


@pytest.mark.parametrize(
    "mask, button",
    [(0x0001, ControllerButton.DPAD_UP), (0x8000, ControllerButton.BUTTON_Y)],
)
def test_button_values_fixed_by_layout(mask, button):
    controller = Controller(0)
    controller.update(mask)
    assert controller.is_pressed(button)
    assert controller.is_down_this_frame(button)


def test_press_is_down_only_on_first_frame():
    controller = Controller(0)
    controller.update(ControllerButton.BUTTON_A)
    assert controller.is_down_this_frame(ControllerButton.BUTTON_A)
    assert controller.is_pressed(ControllerButton.BUTTON_A)
    controller.update(ControllerButton.BUTTON_A)
    assert not controller.is_down_this_frame(ControllerButton.BUTTON_A)
    assert controller.is_pressed(ControllerButton.BUTTON_A)


def test_release_is_up_on_that_frame():
    controller = Controller(0)
    controller.update(ControllerButton.DPAD_LEFT)
    controller.update(0)
    assert controller.is_up_this_frame(ControllerButton.DPAD_LEFT)
    assert not controller.is_pressed(ControllerButton.DPAD_LEFT)
    controller.update(0)
    assert not controller.is_up_this_frame(ControllerButton.DPAD_LEFT)


def test_buttons_are_independent():
    controller = Controller(0)
    controller.update(ControllerButton.DPAD_UP | ControllerButton.BUTTON_B)
    controller.update(ControllerButton.BUTTON_B)
    assert controller.is_up_this_frame(ControllerButton.DPAD_UP)
    assert not controller.is_up_this_frame(ControllerButton.BUTTON_B)
    assert controller.is_pressed(ControllerButton.BUTTON_B)


@pytest.mark.parametrize("button", list(ControllerButton))
def test_nothing_pressed_initially(button):
    controller = Controller(0)
    assert not controller.is_pressed(button)
    assert not controller.is_down_this_frame(button)
    assert not controller.is_up_this_frame(button)


def test_update_without_mask_uses_button_source():
    controller = Controller(0)
    controller.button_source = lambda: int(ControllerButton.START)
    controller.update()
    assert controller.is_down_this_frame(ControllerButton.START)
    assert not controller.is_pressed(ControllerButton.BACK)


def test_default_source_without_gamepad_reports_nothing():
    controller = Controller(7)
    controller.update()
    assert not any(controller.is_pressed(button) for button in ControllerButton)