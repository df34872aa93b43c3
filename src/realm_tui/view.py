# =============================================================================
# View
# =============================================================================
# The registry owning every mounted component.
#
# Components are stored by string id, which is the only way the rest of the
# application refers to them. The View also tracks which component has
# focus and routes input events there:
#
#   view = View()
#   view.mount("INPUT", Input(props))
#   view.active("INPUT")
#   msg = view.on(KeyEvent(Key.ENTER))     # ("INPUT", OnSubmit(...)) or None
#
# Invariant: the focused id, when set, always names a mounted component.
#
# Operations on ids that aren't mounted are not errors: they return None or
# do nothing (logged at debug level).
# =============================================================================

import logging

from realm_tui.component import Component
from realm_tui.core.event import Event
from realm_tui.core.msg import Payload, TaggedMsg
from realm_tui.core.props import Props
from realm_tui.rendering import Frame, Rect

logger = logging.getLogger(__name__)


class View:
    """
    Owns components and their focus.

    Each View is independent: there is no global registry, so several Views
    can coexist (handy in tests).

    Usage:
        >>> view = View()
        >>> view.mount("LABEL", Label(props))
        >>> view.render("LABEL", frame, area)
    """

    def __init__(self) -> None:
        self._components: dict[str, Component] = {}
        self._focus: str | None = None
        # Previously focused ids, most recent last (used by blur())
        self._focus_stack: list[str] = []

    # -------------------------------------------------------------------------
    # Registry
    # -------------------------------------------------------------------------

    def mount(self, id: str, component: Component) -> None:
        """
        Mount a component under `id`.

        If `id` is already mounted, the old component is replaced and its
        state is gone. If the old component had focus, the new one gets it.
        """
        previous = self._components.get(id)
        self._components[id] = component
        if previous is not None:
            logger.debug(f"Replaced component {id!r}")
            if self._focus == id:
                previous.blur()
                component.active()
        else:
            logger.debug(f"Mounted component {id!r}")

    def umount(self, id: str) -> None:
        """
        Remove the component mounted under `id`.

        Unmounting the focused component clears focus. Unknown ids are
        ignored.
        """
        component = self._components.pop(id, None)
        if component is None:
            logger.debug(f"umount: no component {id!r}")
            return

        self._focus_stack = [f for f in self._focus_stack if f != id]
        if self._focus == id:
            component.blur()
            self._focus = None
        logger.debug(f"Unmounted component {id!r}")

    # Alias
    unmount = umount

    def ids(self) -> list[str]:
        """Return the ids of all mounted components."""
        return list(self._components)

    def __contains__(self, id: object) -> bool:
        return id in self._components

    def __len__(self) -> int:
        return len(self._components)

    # -------------------------------------------------------------------------
    # Focus
    # -------------------------------------------------------------------------

    @property
    def focus(self) -> str | None:
        """The focused component's id, or None."""
        return self._focus

    def active(self, id: str) -> None:
        """
        Give focus to `id`.

        If `id` isn't mounted, focus stays where it was.
        """
        component = self._components.get(id)
        if component is None:
            logger.debug(f"active: no component {id!r}, focus unchanged")
            return
        if self._focus == id:
            return

        # At most one stack entry per id
        previous = self._focus
        self._focus_stack = [f for f in self._focus_stack if f != id and f != previous]
        if previous is not None:
            self._components[previous].blur()
            self._focus_stack.append(previous)
        self._focus = id
        component.active()

    def blur(self) -> None:
        """
        Take focus away from the focused component.

        Focus goes back to the most recently focused component that is
        still mounted, or is cleared if there is none.
        """
        if self._focus is None:
            return

        self._components[self._focus].blur()
        self._focus = None

        while self._focus_stack:
            previous = self._focus_stack.pop()
            if previous in self._components:
                self._focus = previous
                self._components[previous].active()
                break

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def on(self, event: Event) -> TaggedMsg | None:
        """
        Route an input event to the focused component.

        Returns:
            (focused id, Msg) if the component produced a message, None if
            it didn't or nothing has focus.
        """
        if self._focus is None:
            return None

        msg = self._components[self._focus].on(event)
        if msg is None:
            return None
        return (self._focus, msg)

    # -------------------------------------------------------------------------
    # Props and state by id
    # -------------------------------------------------------------------------

    def get_props(self, id: str) -> Props | None:
        """Return the props of `id`, or None if it isn't mounted."""
        component = self._components.get(id)
        if component is None:
            logger.debug(f"get_props: no component {id!r}")
            return None
        return component.get_props()

    def update(self, id: str, props: Props) -> TaggedMsg | None:
        """
        Replace the props of `id`.

        This performs a single step: the message the component returns (if
        any) is tagged and handed back, never dispatched from here. Feed it
        back to the update loop to process it.

        Returns:
            (id, Msg) if the component reported an effect, else None. Also
            None if `id` isn't mounted.
        """
        component = self._components.get(id)
        if component is None:
            logger.debug(f"update: no component {id!r}")
            return None

        msg = component.update(props)
        if msg is None:
            return None
        return (id, msg)

    def get_state(self, id: str) -> Payload | None:
        """Return the current value of `id`, or None if it isn't mounted."""
        component = self._components.get(id)
        if component is None:
            return None
        return component.get_state()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self, id: str, frame: Frame, area: Rect) -> None:
        """Draw component `id` into `area`. Unknown ids draw nothing."""
        component = self._components.get(id)
        if component is None:
            logger.debug(f"render: no component {id!r}")
            return
        component.render(frame, area)
