"""Scene objects, the factory that builds them and the manager that runs them."""

from __future__ import annotations

from typing import Callable, Mapping

SceneConstructor = Callable[[], "BaseScene"]


class SceneError(RuntimeError):
    """Raised when the scene manager is used in a state that does not allow it."""


class BaseScene:
    """A scene with lifecycle hooks driven by a :class:`SceneManager`.

    Subclasses override the hooks and call the base implementation to keep
    the bookkeeping attributes up to date.
    """

    #: Name of the scene that :meth:`change_scene` switches to.
    next_scene: str | None = None

    def __init__(self) -> None:
        self.scene_manager: SceneManager | None = None
        self.active = False
        self.updates = 0
        self.draws = 0

    def initialize(self) -> None:
        """Start the scene."""
        self.active = True

    def finalize(self) -> None:
        """Stop the scene and release what it holds."""
        self.active = False

    def update(self) -> None:
        """Advance the scene by one frame."""
        self.updates += 1

    def draw(self) -> None:
        """Render the scene for the current frame."""
        self.draws += 1

    def change_scene(self) -> None:
        """Ask the owning manager to switch to :attr:`next_scene`."""
        if self.scene_manager is None:
            raise SceneError("scene is not attached to a scene manager")
        if self.next_scene is None:
            raise SceneError(f"{type(self).__name__} has no scene to change to")
        self.scene_manager.change_scene(self.next_scene)


class TitleScene(BaseScene):
    """The title screen; it leads on to the gameplay scene."""

    next_scene = "GAMEPLAY"


class SceneFactory:
    """Builds scenes by name."""

    def __init__(self, scenes: Mapping[str, SceneConstructor] | None = None) -> None:
        self._scenes: dict[str, SceneConstructor] = {"TITLE": TitleScene}
        if scenes:
            self._scenes.update(scenes)

    def register(self, name: str, scene_class: SceneConstructor) -> None:
        """Make ``name`` build scenes with ``scene_class``."""
        self._scenes[name] = scene_class

    def create_scene(self, name: str) -> BaseScene:
        """Build a new scene registered under ``name``.

        Raises KeyError for an unknown name.
        """
        try:
            constructor = self._scenes[name]
        except KeyError:
            raise KeyError(f"unknown scene {name!r}") from None
        return constructor()

    def __contains__(self, name: object) -> bool:
        return name in self._scenes


class SceneManager:
    """Owns the current scene and swaps in the requested one between frames."""

    def __init__(self) -> None:
        self._factory: SceneFactory | None = None
        self.scene: BaseScene | None = None
        self.pending_scene: BaseScene | None = None

    def initialize(self, factory: SceneFactory | None = None) -> None:
        """Attach the factory used by :meth:`change_scene`."""
        self._factory = factory if factory is not None else SceneFactory()

    def finalize(self) -> None:
        """Finalize the current scene and drop everything held."""
        self._factory = None
        self.pending_scene = None
        if self.scene is not None:
            self.scene.finalize()
            self.scene = None

    def update(self) -> None:
        """Switch to a pending scene if any, then update the current one."""
        if self.pending_scene is not None:
            if self.scene is not None:
                self.scene.finalize()
            self.scene, self.pending_scene = self.pending_scene, None
            self.scene.scene_manager = self
            self.scene.initialize()
        self._current().update()

    def draw(self) -> None:
        """Draw the current scene."""
        self._current().draw()

    def change_scene(self, name: str) -> None:
        """Request a switch to the scene named ``name`` at the next update."""
        if self._factory is None:
            raise SceneError("scene manager has not been initialized")
        if self.pending_scene is not None:
            raise SceneError("a scene change is already pending")
        self.pending_scene = self._factory.create_scene(name)

    def _current(self) -> BaseScene:
        if self.scene is None:
            raise SceneError("no active scene")
        return self.scene