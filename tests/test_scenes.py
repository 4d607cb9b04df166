import pytest

from renderkit.scenes import (
    BaseScene,
    SceneError,
    SceneFactory,
    SceneManager,
    TitleScene,
)


class RecordingScene(BaseScene):
    next_scene = "TITLE"

    def __init__(self):
        super().__init__()
        self.finalized = 0

    def finalize(self):
        super().finalize()
        self.finalized += 1


def make_manager():
    manager = SceneManager()
    manager.initialize(SceneFactory({"GAMEPLAY": RecordingScene}))
    return manager


def test_factory_builds_title_by_default():
    scene = SceneFactory().create_scene("TITLE")
    assert isinstance(scene, TitleScene)
    scene.initialize()
    scene.update()
    assert scene.active is True
    assert scene.updates == 1


def test_factory_unknown_name_raises():
    with pytest.raises(KeyError):
        SceneFactory().create_scene("NOPE")


def test_factory_register_and_contains():
    factory = SceneFactory()
    assert "GAMEPLAY" not in factory
    factory.register("GAMEPLAY", RecordingScene)
    assert "GAMEPLAY" in factory
    assert isinstance(factory.create_scene("GAMEPLAY"), RecordingScene)


def test_factory_creates_fresh_instances():
    factory = SceneFactory({"GAMEPLAY": RecordingScene})
    first = factory.create_scene("GAMEPLAY")
    first.finalize()
    second = factory.create_scene("GAMEPLAY")
    assert first.finalized == 1
    assert second.finalized == 0


def test_change_scene_takes_effect_on_update():
    manager = make_manager()
    manager.change_scene("GAMEPLAY")
    assert manager.scene is None
    manager.update()
    scene = manager.scene
    assert isinstance(scene, RecordingScene)
    assert scene.active is True
    assert scene.scene_manager is manager
    assert scene.updates == 1
    assert manager.pending_scene is None


def test_switching_finalizes_old_scene():
    manager = make_manager()
    manager.change_scene("GAMEPLAY")
    manager.update()
    old = manager.scene
    manager.change_scene("TITLE")
    manager.update()
    assert old.finalized == 1
    assert old.active is False
    assert isinstance(manager.scene, TitleScene)


def test_draw_reaches_scene():
    manager = make_manager()
    manager.change_scene("GAMEPLAY")
    manager.update()
    manager.draw()
    manager.draw()
    assert manager.scene.draws == 2


def test_change_scene_twice_before_update_raises():
    manager = make_manager()
    manager.change_scene("GAMEPLAY")
    with pytest.raises(SceneError):
        manager.change_scene("TITLE")


def test_change_scene_without_initialize_raises():
    with pytest.raises(SceneError):
        SceneManager().change_scene("TITLE")


def test_update_without_scene_raises():
    manager = make_manager()
    with pytest.raises(SceneError):
        manager.update()


def test_draw_without_scene_raises():
    with pytest.raises(SceneError):
        SceneManager().draw()


def test_finalize_finalizes_current_scene():
    manager = make_manager()
    manager.change_scene("GAMEPLAY")
    manager.update()
    scene = manager.scene
    manager.finalize()
    assert scene.finalized == 1
    assert manager.scene is None
    with pytest.raises(SceneError):
        manager.change_scene("TITLE")


def test_scene_change_scene_requests_next():
    manager = make_manager()
    manager.change_scene("TITLE")
    manager.update()
    title = manager.scene
    title.change_scene()
    assert isinstance(manager.pending_scene, RecordingScene)
    manager.update()
    assert title.active is False
    assert isinstance(manager.scene, RecordingScene)
    assert manager.scene.updates == 1


def test_scene_change_scene_without_manager_raises():
    with pytest.raises(SceneError):
        TitleScene().change_scene()


def test_base_scene_without_target_raises():
    scene = BaseScene()
    scene.scene_manager = make_manager()
    with pytest.raises(SceneError):
        scene.change_scene()