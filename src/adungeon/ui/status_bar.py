from dataclasses import dataclass


@dataclass
class StatusBarState:
    seed: int = 0
    blocks: int = 0
    prob: int = 0
    scroll_x: int = 0
    scroll_y: int = 0

    def text(self) -> str:
        # Same fields and order as the dump header.
        return (f"seed={self.seed}  blocks={self.blocks}  prob={self.prob}%"
                f"   view@({self.scroll_x},{self.scroll_y})")


def render_status_bar(screen, origin_xy: tuple[int, int], width: int, height: int,
                      state: StatusBarState) -> None:
    """
    Draw a one-line status bar. Does not touch the grid.
    """
    import pygame  # local import to avoid hard dep when not used
    ox, oy = origin_xy
    pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(ox, oy, width, height))
    font = pygame.font.SysFont(None, max(10, height - 4))
    img = font.render(state.text(), True, (220, 220, 220))
    screen.blit(img, (ox + height // 2, oy + (height - img.get_height()) // 2))
