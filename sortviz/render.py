import pygame

from .observe import Observer

# ============================================================
# ======================= COLOR / DRAW =======================
# ============================================================

def value_to_color(value, max_value):
    """Blue for small values through to red for the largest."""
    r = min(1.0, max(0.0, value / max_value)) if max_value else 0.0
    return (int(255 * r), 0, int(255 * (1 - r)))


def label_font():
    return pygame.font.SysFont("consolas", 16)


def draw_bars(screen, values, active_indices, cfg, label="", font=None):
    screen.fill(cfg.background)
    n = len(values)
    width, height = screen.get_size()
    if n:
        top = max(values)
        bw  = width / n
        for i, v in enumerate(values):
            h = (v / top) * (height - 30) if top else 0
            c = cfg.active_color if i in active_indices else value_to_color(v, top)
            pygame.draw.rect(screen, c, (i * bw, height - h, max(1, bw - cfg.bar_spacing), h))
    if label:
        if font is None:
            font = label_font()
        screen.blit(font.render(label, True, cfg.label_color), (8, 6))
    pygame.display.flip()


# ============================================================
# ======================== RENDERER ==========================
# ============================================================

class BarRenderer(Observer):
    """
    Draws the observed range as a bar chart after every step.

    Frames are paced with ``pygame.time.Clock``. Closing the window or
    pressing ESC requests a stop, which the sort honours after the step
    being drawn.
    """

    def __init__(self, cfg, screen=None):
        self.cfg    = cfg
        self.screen = screen
        self.clock  = pygame.time.Clock()
        self.label  = ""
        self.frames = 0
        self.closed = False
        self.font   = None

    def open(self):
        pygame.init()
        self.screen = pygame.display.set_mode((self.cfg.width, self.cfg.height))
        pygame.display.set_caption(self.cfg.title)
        return self

    def close(self):
        self.font = None
        pygame.quit()

    def pump(self):
        """Handle pending window events; returns False once the user wants out."""
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT or (ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE):
                self.closed = True
        if self.closed:
            self.request_stop()
        return not self.closed

    def show(self, values, active=(), label=None):
        label = self.label if label is None else label
        if label and self.font is None:
            self.font = label_font()
        draw_bars(self.screen, values, active, self.cfg, label, self.font)

    def wait(self, ms):
        """Sleep for ``ms`` while keeping the window responsive."""
        end = pygame.time.get_ticks() + ms
        while pygame.time.get_ticks() < end and self.pump():
            pygame.time.wait(min(20, max(0, end - pygame.time.get_ticks())))
        return not self.closed

    def notify(self, view, bounds):
        if self.cfg.fps:
            self.clock.tick(self.cfg.fps)
        self.pump()
        lo = bounds[0]
        self.show(view.window(), [i - lo for i in view.active])
        self.frames += 1
