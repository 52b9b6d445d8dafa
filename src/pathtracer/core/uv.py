# core/uv.py
class UV:
    """
    A surface texture coordinate, as attached to triangle vertices.
    """
    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    @staticmethod
    def barycentric(uv0: "UV", uv1: "UV", uv2: "UV", b1: float, b2: float) -> "UV":
        """
        Blends three coordinates with weights (1 - b1 - b2, b1, b2).
        """
        w = 1.0 - b1 - b2
        return UV(w * uv0.u + b1 * uv1.u + b2 * uv2.u,
                  w * uv0.v + b1 * uv1.v + b2 * uv2.v)

    def __eq__(self, other) -> bool:
        if not isinstance(other, UV):
            return NotImplemented
        return self.u == other.u and self.v == other.v

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
