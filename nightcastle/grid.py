"""Spatial containers that hold, update and draw the world's objects."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from .config import GRIDCONTAINER_WIDTH, VIEWPORT_HEIGHT
from .enums import ObjectState
from .objects import GameObject, RenderView


class GridContainer(GameObject):
    """One vertical strip of the world and the objects placed in it."""

    def __init__(self, x=0.0, y=0.0):
        super().__init__(x, y, GRIDCONTAINER_WIDTH, float(VIEWPORT_HEIGHT))
        self.objects: list[GameObject] = []

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[GameObject]:
        return iter(self.objects)

    def add(self, obj: GameObject) -> None:
        self.objects.append(obj)

    def clear(self) -> None:
        self.objects.clear()

    def remove_all(self) -> None:
        """Drop every object held by this container."""
        self.objects.clear()

    def is_out_of_camera(self) -> bool:
        """Whether the container is outside the view; every container is treated as visible."""
        return False

    def update(self, dt, co_objects: Optional[Sequence[GameObject]] = None) -> None:
        """Update every object and drop those that have died."""
        for obj in list(self.objects):
            obj.update(dt, co_objects)
        self.objects = [obj for obj in self.objects if obj.state != ObjectState.DIE]

    def render(self, view: RenderView) -> None:
        for obj in self.objects:
            obj.render(view)


class GridManager:
    """An ordered set of grid containers laid side by side."""

    def __init__(self, count=0):
        self.containers: list[GridContainer] = [
            GridContainer(i * GRIDCONTAINER_WIDTH, 0) for i in range(count)
        ]

    def _visible(self) -> Iterator[GridContainer]:
        return (c for c in self.containers if not c.is_out_of_camera())

    def update(self, dt, co_objects: Optional[Sequence[GameObject]] = None) -> None:
        for container in self._visible():
            container.update(dt, co_objects)

    def render(self, view: RenderView) -> None:
        for container in self._visible():
            container.render(view)

    def add_container(self, container: GridContainer) -> None:
        self.containers.append(container)

    def add_object(self, obj: GameObject) -> bool:
        """Place an object in the first container; False if there is none."""
        if not self.containers:
            return False
        self.containers[0].add(obj)
        return True

    def clear(self) -> None:
        """Forget all containers."""
        self.containers.clear()

    def remove_all(self) -> None:
        """Empty every container, then forget them."""
        for container in self.containers:
            container.remove_all()
        self.containers.clear()

    def collect_objects(self) -> list[GameObject]:
        """Return the objects of all visible containers, in order."""
        return [obj for container in self._visible() for obj in container]


class ObjectManager:
    """A flat list of objects drawn in insertion order."""

    def __init__(self):
        self.objects: list[GameObject] = []

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[GameObject]:
        return iter(self.objects)

    def add(self, obj: GameObject) -> None:
        self.objects.append(obj)

    def remove(self, obj: GameObject) -> None:
        """Remove every occurrence of the object."""
        self.objects = [o for o in self.objects if o is not obj]

    def render(self, view: RenderView) -> None:
        for obj in self.objects:
            obj.render(view)