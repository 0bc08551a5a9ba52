"""RoomFind: shortest routes between rooms of a building."""
