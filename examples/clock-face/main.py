"""
tick-chain Clock Face
A pygame window showing an hh:mm:ss dial driven by chained ticks.

Controls:
  Space   Pause / resume
  D       Toggle counting up / down
  F       Fast mode (one round per frame)
  Esc     Quit
"""

import sys

import pygame

from tick_chain import Dial, Unit

# --- Configuration ---
WIDTH, HEIGHT = 640, 320
FPS = 60
TICK_MS = 1000
TITLE = "tick-chain Clock Face"

BG_COLOR = (26, 26, 46)
DIGIT_COLOR = (0, 255, 255)
FLASH_COLOR = (255, 215, 0)
HUD_COLOR = (200, 200, 220)
FLASH_FRAMES = 20


class PanelHand:
    """A hand drawn as a digit panel; flashes for a few frames after changing."""

    def __init__(self, text: str = "00") -> None:
        self.text = text
        self.flash = 0

    def read(self) -> float:
        return float(self.text)

    def write(self, text: str) -> None:
        self.text = text

    def mark_changed(self) -> None:
        self.flash = FLASH_FRAMES


def build_dial(hands: list[PanelHand], direction: str) -> Dial:
    seconds, minutes, hours = hands
    return Dial(
        [
            Unit(seconds, 60, seconds.mark_changed),
            Unit(minutes, 60, minutes.mark_changed),
            Unit(hours, 24, hours.mark_changed),
        ],
        direction=direction,
    )


def draw_panels(screen, font, hands: list[PanelHand]) -> None:
    texts = []
    for hand in reversed(hands):
        color = FLASH_COLOR if hand.flash > 0 else DIGIT_COLOR
        texts.append(font.render(hand.text, True, color))
        hand.flash = max(0, hand.flash - 1)

    colon = font.render(":", True, HUD_COLOR)
    total = sum(t.get_width() for t in texts) + colon.get_width() * (len(texts) - 1)
    x = (WIDTH - total) // 2
    y = (HEIGHT - texts[0].get_height()) // 2
    for i, surface in enumerate(texts):
        screen.blit(surface, (x, y))
        x += surface.get_width()
        if i < len(texts) - 1:
            screen.blit(colon, (x, y))
            x += colon.get_width()


def main():
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    digit_font = pygame.font.SysFont("monospace", 96, bold=True)
    hud_font = pygame.font.SysFont("monospace", 14)

    hands = [PanelHand(), PanelHand(), PanelHand()]
    direction = "up"
    dial = build_dial(hands, direction)

    paused = False
    fast = False
    since_tick = 0

    running = True
    while running:
        since_tick += pg_clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_d:
                    direction = "down" if direction == "up" else "up"
                    dial = build_dial(hands, direction)
                elif event.key == pygame.K_f:
                    fast = not fast

        if not paused:
            if fast:
                dial.step()
                since_tick = 0
            while since_tick >= TICK_MS:
                dial.step()
                since_tick -= TICK_MS
        else:
            since_tick = 0

        screen.fill(BG_COLOR)
        draw_panels(screen, digit_font, hands)

        status = (
            f"{direction}  |  rounds: {dial.rounds}  |  "
            f"{'paused' if paused else 'fast' if fast else 'running'}"
        )
        screen.blit(hud_font.render(status, True, HUD_COLOR), (10, HEIGHT - 24))
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
