from __future__ import annotations

from typing import List, Optional

try:
    import pygame  # type: ignore
except ImportError:  # pragma: no cover - pygame not installed in some envs
    pygame = None

from snaketerm.controls import Command, command_for_key
from snaketerm.snapshot import BoardSnapshot

BACKGROUND = (20, 20, 20)
GRID_LINE = (30, 30, 30)
HEAD_COLOR = (0, 200, 0)
BODY_COLOR = (0, 150, 0)
FOOD_COLOR = (200, 50, 50)
TEXT_COLOR = (220, 220, 220)
HUD_HEIGHT = 28


class PygameRenderer:
    def __init__(self, width: int, height: int, cell_size: int = 20, fps: int = 60) -> None:
        if pygame is None:
            raise ImportError("pygame is required for rendering")

        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.fps = fps

        pygame.init()
        width_px = width * cell_size
        height_px = height * cell_size + HUD_HEIGHT
        self._window = pygame.display.set_mode((width_px, height_px))
        pygame.display.set_caption("Snake")
        self._clock = pygame.time.Clock()
        self._font = pygame.font.Font(None, 24)

    def poll_commands(self) -> List[Command]:
        commands: List[Command] = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                commands.append(Command.QUIT)
            elif event.type == pygame.KEYDOWN:
                command = command_for_key(pygame.key.name(event.key))
                if command is not None:
                    commands.append(command)
        return commands

    def draw(self, snapshot: BoardSnapshot) -> None:
        self._window.fill(BACKGROUND)
        for x in range(snapshot.width):
            for y in range(snapshot.height):
                pygame.draw.rect(self._window, GRID_LINE, self._cell_rect(x, y), 1)

        for i, (x, y) in enumerate(snapshot.snake):
            color = HEAD_COLOR if i == 0 else BODY_COLOR
            pygame.draw.rect(self._window, color, self._cell_rect(x, y))

        if snapshot.food is not None and not snapshot.game_over:
            fx, fy = snapshot.food
            pygame.draw.rect(self._window, FOOD_COLOR, self._cell_rect(fx, fy))

        self._draw_hud(snapshot)

        pygame.display.flip()
        self._clock.tick(self.fps)

    def close(self) -> None:
        if pygame:
            pygame.quit()

    def _cell_rect(self, x: int, y: int):
        return pygame.Rect(
            x * self.cell_size,
            y * self.cell_size + HUD_HEIGHT,
            self.cell_size,
            self.cell_size,
        )

    def _draw_hud(self, snapshot: BoardSnapshot) -> None:
        text = f"Score: {snapshot.score} | r restart | q quit"
        self._blit(text, (8, 6))

        overlay: Optional[str] = None
        if snapshot.game_over:
            overlay = f"Game Over! Score: {snapshot.score}"
        elif snapshot.paused:
            overlay = "Paused"
        if overlay:
            surface = self._font.render(overlay, True, TEXT_COLOR)
            rect = surface.get_rect(
                center=(
                    self.width * self.cell_size // 2,
                    self.height * self.cell_size // 2 + HUD_HEIGHT,
                )
            )
            self._window.blit(surface, rect)

    def _blit(self, text: str, pos) -> None:
        self._window.blit(self._font.render(text, True, TEXT_COLOR), pos)
