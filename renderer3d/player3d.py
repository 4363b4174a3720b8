"""
3D Player - First-person viewer pose with free movement
Movement is not blocked by walls
"""

import math
from utils.constants import FOV, PLAYER_MOVE_SPEED, PLAYER_STRAFE_SPEED, PLAYER_TURN_SPEED
from utils.helpers import normalize_angle


class Player3D:
    """
    First-person viewer: position in grid cells, facing angle and field of view
    """

    def __init__(self, x, y, angle=0.0, fov=FOV):
        """
        Initialize 3D player

        Args:
            x, y: Starting position in cells (x = column, y = row)
            angle: Starting view angle in radians (0 = east, pi/2 = south)
            fov: Horizontal field of view in radians
        """
        self.world_x = float(x)
        self.world_y = float(y)
        self.angle = angle
        self.fov = fov

        # Movement settings
        self.move_speed = PLAYER_MOVE_SPEED
        self.strafe_speed = PLAYER_STRAFE_SPEED
        self.turn_speed = PLAYER_TURN_SPEED

    @classmethod
    def from_spawn(cls, spawn_y, angle=0.0, fov=FOV):
        """Viewer standing in the first room column, facing into the maze"""
        return cls(1.5, spawn_y, angle, fov)

    @property
    def grid_x(self):
        """Grid column the viewer stands in"""
        return int(math.floor(self.world_x))

    @property
    def grid_y(self):
        """Grid row the viewer stands in"""
        return int(math.floor(self.world_y))

    @property
    def cell(self):
        """(row, col) of the viewer's grid cell"""
        return self.grid_y, self.grid_x

    def move(self, forward, strafe, dt):
        """
        Move player

        Args:
            forward: Forward/backward input (-1 to 1)
            strafe: Left/right strafe input (-1 to 1)
            dt: Delta time in seconds

        Returns:
            True if player moved
        """
        if forward == 0 and strafe == 0:
            return False

        cos_a = math.cos(self.angle)
        sin_a = math.sin(self.angle)

        # Forward/backward movement
        move_x = cos_a * forward * self.move_speed
        move_y = sin_a * forward * self.move_speed

        # Strafe movement (perpendicular to view)
        move_x += -sin_a * strafe * self.strafe_speed
        move_y += cos_a * strafe * self.strafe_speed

        self.world_x += move_x * dt
        self.world_y += move_y * dt
        return True

    def rotate(self, delta_angle):
        """
        Rotate player view

        Args:
            delta_angle: Angle change in radians
        """
        self.angle = normalize_angle(self.angle + delta_angle)

    def handle_keyboard_turn(self, turn_input, dt):
        """
        Handle keyboard-based turning

        Args:
            turn_input: -1 (left) to 1 (right)
            dt: Delta time
        """
        self.rotate(turn_input * self.turn_speed * dt)

    def get_position(self):
        """Get current world position"""
        return self.world_x, self.world_y

    def get_angle_degrees(self):
        """Get view angle in degrees"""
        return math.degrees(self.angle)

    def __repr__(self):
        return f"Player3D(pos=({self.world_x:.2f}, {self.world_y:.2f}), angle={self.get_angle_degrees():.1f}°)"
