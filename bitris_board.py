"""Board helpers: collides, stamp, landing"""
from bitris_field import Field
from bitris_piece import Piece, cell_coordinates


def collides(field: Field, piece: Piece) -> bool:
    """Return True if the piece overlaps a wall, the floor or an occupied cell.

    Cells above the field (y < 0) are legal. The field must not contain the
    piece's own cells.
    """
    for i in range(16):
        c = cell_coordinates(piece, i)
        if c is None:
            continue
        x, y = c
        if x < 0 or x >= field.width or y >= field.height:
            return True
        if y >= 0 and field.get(x, y):
            return True
    return False


def stamp(field: Field, piece: Piece, occupied: bool) -> None:
    """Set or clear the piece's cells in the field (no collision check).

    Cells above the field are not written. The game never locks such a
    piece (it ends the game instead), so only display copies lose them.
    """
    for i in range(16):
        c = cell_coordinates(piece, i)
        if c is None:
            continue
        x, y = c
        # spawn area has no storage
        if y >= 0:
            field.set(x, y, occupied)


def landing(field: Field, piece: Piece) -> Piece:
    """Return the piece moved down as far as it can fall."""
    test = piece
    while True:
        nxt = test.moved(dy=1)
        if collides(field, nxt):
            return test
        test = nxt
