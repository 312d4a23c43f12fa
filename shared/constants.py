# shared/constants.py

APP_TITLE = "Silhouette Breakout"
WIDTH, HEIGHT = 800, 900   # fallback client area when the desktop size is unknown
FPS = 60
WINDOW_FRAME = 80   # title bar + taskbar allowance when sizing from the desktop

WHITE = (245, 245, 245)
BLACK = (20, 20, 20)
RED = (240, 40, 40)
BG = (255, 255, 255)
CLEAR_BG = (0, 0, 0, 0)

DEFAULT_STAGE = "default"
