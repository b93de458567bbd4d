import pytest

from skinrig.scene import AbstractSceneFactory, BaseScene, SceneFactory, SceneManager


class RecordingScene(BaseScene):
    def __init__(self):
        self.calls = []

    def initialize(self):
        self.calls.append("initialize")

    def finalize(self):
        self.calls.append("finalize")

    def update(self):
        self.calls.append("update")

    def draw(self):
        self.calls.append("draw")


class OtherScene(RecordingScene):
    pass


def make_manager():
    factory = SceneFactory()
    factory.register("TITLE", RecordingScene)
    factory.register("GAMEPLAY", OtherScene)
    return SceneManager(factory)


def test_abstract_factory_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AbstractSceneFactory()


def test_factory_creates_initialized_scene():
    factory = SceneFactory()
    factory.register("TITLE", RecordingScene)
    scene = factory.create_scene("TITLE")
    assert isinstance(scene, RecordingScene)
    assert scene.calls == ["initialize"]


def test_factory_unknown_name_gives_none():
    factory = SceneFactory()
    assert factory.create_scene("MISSING") is None


def test_factory_register_rejects_non_callable():
    factory = SceneFactory()
    with pytest.raises(TypeError):
        factory.register("TITLE", 42)


def test_change_scene_without_factory_raises():
    manager = SceneManager()
    with pytest.raises(RuntimeError):
        manager.change_scene("TITLE")


def test_change_scene_twice_before_update_raises():
    manager = make_manager()
    manager.change_scene("TITLE")
    with pytest.raises(RuntimeError):
        manager.change_scene("GAMEPLAY")


def test_update_without_scene_raises():
    manager = make_manager()
    with pytest.raises(RuntimeError):
        manager.update()


def test_unknown_scene_leaves_nothing_to_update():
    manager = make_manager()
    manager.change_scene("MISSING")
    assert manager.next_scene is None
    with pytest.raises(RuntimeError):
        manager.update()


def test_update_switches_to_pending_scene():
    manager = make_manager()
    manager.change_scene("TITLE")
    pending = manager.next_scene
    manager.update()
    assert manager.scene is pending
    assert manager.next_scene is None
    assert pending.calls == ["initialize", "finalize", "initialize", "update"]


def test_switch_finalizes_old_scene():
    manager = make_manager()
    manager.change_scene("TITLE")
    manager.update()
    old = manager.scene
    manager.change_scene("GAMEPLAY")
    manager.update()
    assert isinstance(manager.scene, OtherScene)
    assert old.calls[-1] == "finalize"


def test_draw_delegates_to_current_scene():
    manager = make_manager()
    manager.change_scene("TITLE")
    manager.update()
    manager.draw()
    assert manager.scene.calls[-1] == "draw"


def test_draw_without_scene_raises():
    manager = make_manager()
    with pytest.raises(RuntimeError):
        manager.draw()


def test_close_finalizes_current_scene():
    manager = make_manager()
    manager.change_scene("TITLE")
    manager.update()
    scene = manager.scene
    manager.close()
    assert scene.calls[-1] == "finalize"
    assert manager.scene is None


def test_context_manager_closes():
    with make_manager() as manager:
        manager.change_scene("TITLE")
        manager.update()
        scene = manager.scene
    assert scene.calls[-1] == "finalize"