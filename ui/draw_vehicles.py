#!/usr/bin/env python3
"""Vehicle sprite rendering (mixin)."""

from __future__ import annotations

from typing import Dict

import pygame

from sim.kinematics import Vehicle


class VehicleRenderer:
    """Mixin that draws the vehicle sprite rotated to its heading.

    The sprite faces +X before rotation.  One unrotated sprite is cached
    per driving mode.
    """

    _sprite_cache: Dict[bool, pygame.Surface]

    def _vehicle_sprite(self, autonomous: bool) -> pygame.Surface:
        cache = self.__dict__.setdefault("_sprite_cache", {})
        if autonomous in cache:
            return cache[autonomous]

        w, h = self.VEHICLE_SIZE_PX
        sprite = pygame.Surface((w, h), pygame.SRCALPHA)
        hull = sprite.get_rect()
        pygame.draw.rect(sprite, self.VEHICLE_COLOR, hull, border_radius=4)

        # Darker cabin toward the front
        cabin = pygame.Rect(0, 0, w // 3, h - 4)
        cabin.midright = (w - 4, h // 2)
        r, g, b = self.VEHICLE_COLOR
        pygame.draw.rect(sprite, (r // 2, g // 2, b // 2), cabin, border_radius=2)

        # Roof-mounted lidar puck
        pygame.draw.circle(sprite, self.LIDAR_COLOR, (w // 2 - 2, h // 2), 2)

        # Outline colour shows who is driving
        outline = self.AUTO_COLOR if autonomous else self.MANUAL_COLOR
        pygame.draw.rect(sprite, outline, hull, width=1, border_radius=4)

        cache[autonomous] = sprite
        return sprite

    def draw_vehicle(self, surface: pygame.Surface, vehicle: Vehicle, autonomous: bool) -> None:
        sprite = self._vehicle_sprite(autonomous)
        # Screen Y points down, so a positive world heading is clockwise on screen.
        rotated = pygame.transform.rotate(sprite, -vehicle.heading)
        centre = self._to_int(self.camera.world_to_screen(vehicle.x, vehicle.y))
        surface.blit(rotated, rotated.get_rect(center=centre))
