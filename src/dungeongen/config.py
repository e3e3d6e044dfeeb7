from dataclasses import dataclass

@dataclass(frozen=True)
class GeneratorConfig:
    # Percent chance that an attachment tries a room before a corridor.
    room_chance: int = 50
    room_min_size: int = 3
    room_max_size: int = 16
    corridor_min_length: int = 3
    corridor_max_length: int = 10
    # Seam re-picks per has_exits() call before generation gives up.
    max_exit_attempts: int = 1000

    def __post_init__(self) -> None:
        if not 0 <= self.room_chance <= 100:
            raise ValueError(f"room_chance must be within 0..100, got {self.room_chance}")
        # A room needs at least one interior cell for object placement.
        if not 3 <= self.room_min_size <= self.room_max_size:
            raise ValueError(
                f"room sizes must satisfy 3 <= min <= max, got {self.room_min_size}..{self.room_max_size}"
            )
        if not 1 <= self.corridor_min_length <= self.corridor_max_length:
            raise ValueError(
                "corridor lengths must satisfy 1 <= min <= max, "
                f"got {self.corridor_min_length}..{self.corridor_max_length}"
            )
        if self.max_exit_attempts < 1:
            raise ValueError("max_exit_attempts must be positive")

# Defaults used when a Dungeon is built without an explicit config
DEFAULT_CONFIG = GeneratorConfig()
