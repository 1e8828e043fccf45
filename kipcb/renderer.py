"""A window that the board is drawn into."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

BACKGROUND = pygame.Color(0, 0, 0, 255)


class Renderer:
    """An on-screen window with a drawing surface, usable as a context manager."""

    def __init__(self, title: str, width: int, height: int) -> None:
        os.environ.setdefault("SDL_VIDEO_WINDOW_POS", "100,100")
        try:
            pygame.display.init()
            self._surface = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            pygame.display.quit()
            raise RuntimeError(f"cannot create window: {exc}") from exc
        pygame.display.set_caption(title)
        self._closed = False

    @property
    def surface(self) -> pygame.Surface:
        """The surface primitives are drawn onto."""
        if self._closed:
            raise RuntimeError("renderer is closed")
        return self._surface

    def clear(self) -> None:
        """Fill the whole window with the background colour."""
        self.surface.fill(BACKGROUND)

    def present(self) -> None:
        """Show what has been drawn since the last call."""
        if self._closed:
            raise RuntimeError("renderer is closed")
        pygame.display.flip()

    def handle_events(self) -> bool:
        """Drain pending events; return False once the window is asked to quit."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
        return True

    def close(self) -> None:
        """Destroy the window; calling it again does nothing."""
        if not self._closed:
            self._closed = True
            pygame.display.quit()

    def __enter__(self) -> Renderer:
        return self

    def __exit__(self, *args) -> None:
        self.close()