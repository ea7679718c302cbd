CELL_COUNT = 10
CELL_SIZE = 48
HAND_CAPACITY = 3
BOTTOM_MARGIN = 20

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.85
BOARD_MAX_HEIGHT_PCT = 0.60

# Vertical band below the board that holds the hand pieces.
HAND_AREA_HEIGHT_PCT = 0.22
# Gap between board edge and the hand band / icon band.
BOARD_GAP = 16

# Action icons (undo, pause) share a row above the board.
ICON_SIZE = 48
ICON_GAP = 24

# Piece colours indexed by Piece.color_index. Index -1 is an empty cell.
PALETTE = [
    (126, 142, 220),  # 1x1
    (255, 197, 61),   # 2x2
    (76, 212, 174),   # 3x3
    (255, 151, 69),   # 2x1
    (253, 128, 124),  # 3x1
    (230, 106, 130),  # 4x1
    (218, 101, 61),   # 5x1
    (89, 203, 134),   # small L
    (84, 190, 231),   # big L
]
EMPTY_CELL_COLOR = (233, 233, 233)
BAND_COLOR = (40, 40, 48)
UNDO_ICON_COLOR = (255, 208, 94)
PAUSE_ICON_COLOR = (210, 210, 225)

# Save file header; bump SAVE_VERSION whenever the save layout changes.
SAVE_MAGIC = b"BPSV"
SAVE_VERSION = 1
