# viz/renderer_colors.py
BG = (255, 255, 255)
HEAD = (60, 200, 90)
BODY = (40, 160, 70)
EYE = (15, 15, 15)
FOOD = (220, 70, 70)
TEXT = (255, 255, 255)
OVERLAY = (255, 0, 0)
