import pytest

from minigin.components import BaseComponent, UIComponent
from minigin.game_object import GameObject


class Probe(BaseComponent):
    def __init__(self, owner):
        super().__init__(owner)
        self.calls = []

    def update(self):
        self.calls.append("update")

    def render(self):
        self.calls.append("render")


class Panel(UIComponent):
    def __init__(self, owner):
        super().__init__(owner)
        self.drawn = 0

    def render_ui(self):
        self.drawn += 1


def test_base_component_is_abstract():
    with pytest.raises(TypeError):
        BaseComponent(object())


def test_owner_is_kept():
    owner = GameObject()
    comp = owner.add_component(Probe)
    assert comp.owner is owner


def test_mark_for_destruction():
    owner = GameObject()
    comp = owner.add_component(Probe)
    assert comp.is_marked_for_destruction is False
    comp.mark_for_destruction()
    assert comp.is_marked_for_destruction is True
    owner.late_update()
    assert owner.get_component(Probe) is None


def test_concrete_component_methods_run():
    owner = GameObject()
    comp = owner.add_component(Probe)
    owner.update()
    owner.render()
    owner.render_ui()
    assert comp.calls == ["update", "render"]


def test_ui_component_requires_render_ui():
    class Incomplete(UIComponent):
        pass

    with pytest.raises(TypeError):
        GameObject().add_component(Incomplete)


def test_ui_component_only_draws_ui():
    owner = GameObject()
    panel = owner.add_component(Panel)
    owner.update()
    owner.render()
    owner.render_ui()
    owner.render_ui()
    assert panel.drawn == 2
    assert panel.is_marked_for_destruction is False