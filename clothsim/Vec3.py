import math


class Vec3:
    def __init__(self, x, y, z):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def of(cls, value):
        """Coerce a Vec3 or any 3-item sequence into a new Vec3."""
        if isinstance(value, Vec3):
            return value.copy()
        try:
            x, y, z = value
        except (TypeError, ValueError):
            raise ValueError(f"expected a 3-D point, got {value!r}") from None
        return cls(x, y, z)

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other):
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def length(self):
        return math.sqrt(self.length_sq())

    def length_sq(self):
        return self.x * self.x + self.y * self.y + self.z * self.z

    def copy(self):
        return Vec3(self.x, self.y, self.z)

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec3):
            return False
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __repr__(self):
        return f"Vec3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"


# Positions and displacements share one representation.
Point3 = Vec3
Vector3 = Vec3
