# chemistry_importer/models.py
"""
Unified tree model produced by every parser.

A parse result is a tree of immutable ``Node`` objects. Each node carries a
namespaced type tag and an opaque payload (``data``) holding one of the
payload records defined here, serialized as UTF-8 JSON.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

import numpy as np

# Type tags shared with the host application; kept as plain strings.
MOLECULE = "mircmd:chemistry:molecule"
ATOMIC_COORDINATES = "mircmd:chemistry:atomic_coordinates"
VOLUME_CUBE = "mircmd:chemistry:volume_cube"
UNEX = "mircmd:chemistry:unex"

DUMMY_ATOM = -1
PLACEHOLDER_ATOM = -2


def _dump(payload: Dict[str, Any]) -> bytes:
    return json.dumps(payload).encode("utf-8")


def _load(data: bytes) -> Dict[str, Any]:
    return json.loads(data.decode("utf-8"))


@dataclass(frozen=True)
class AtomicCoordinates:
    """
    One block of Cartesian coordinates stored as parallel arrays.

    ``atomic_num[i]`` is the element number of atom ``i`` (``-1`` for a dummy
    atom, ``-2`` for a placeholder); ``x``, ``y`` and ``z`` are in Angstrom.
    """

    atomic_num: List[int]
    x: List[float]
    y: List[float]
    z: List[float]

    def __post_init__(self):
        sizes = {len(self.atomic_num), len(self.x), len(self.y), len(self.z)}
        if len(sizes) != 1:
            raise ValueError(
                f"Atomic coordinate arrays must have equal length, got "
                f"{len(self.atomic_num)}/{len(self.x)}/{len(self.y)}/{len(self.z)}"
            )

    @property
    def n_atoms(self) -> int:
        return len(self.atomic_num)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "atomic_num": list(self.atomic_num),
            "x": list(self.x),
            "y": list(self.y),
            "z": list(self.z),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "AtomicCoordinates":
        return cls(
            atomic_num=[int(n) for n in d["atomic_num"]],
            x=[float(v) for v in d["x"]],
            y=[float(v) for v in d["y"]],
            z=[float(v) for v in d["z"]],
        )

    def to_bytes(self) -> bytes:
        return _dump(self.to_dict())

    @classmethod
    def from_bytes(cls, data: bytes) -> "AtomicCoordinates":
        return cls.from_dict(_load(data))


@dataclass(frozen=True)
class Molecule:
    """Summary of a molecule: atom count, atomic numbers, net charge and name."""

    n_atoms: int = 0
    atomic_num: List[int] = field(default_factory=list)
    charge: int = 0
    name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n_atoms": self.n_atoms,
            "atomic_num": list(self.atomic_num),
            "charge": self.charge,
            "name": self.name,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Molecule":
        return cls(
            n_atoms=int(d["n_atoms"]),
            atomic_num=[int(n) for n in d["atomic_num"]],
            charge=int(d["charge"]),
            name=str(d["name"]),
        )

    def to_bytes(self) -> bytes:
        return _dump(self.to_dict())

    @classmethod
    def from_bytes(cls, data: bytes) -> "Molecule":
        return cls.from_dict(_load(data))


@dataclass(frozen=True, eq=False)
class VolumeCube:
    """
    Volumetric grid data.

    ``cube_data`` is a float64 array of shape ``steps_number`` (n1, n2, n3),
    stored row-major as read from the file.
    """

    comment1: str
    comment2: str
    box_origin: List[float]
    steps_number: List[int]
    steps_size: List[List[float]]
    cube_data: np.ndarray

    def to_dict(self) -> Dict[str, Any]:
        return {
            "comment1": self.comment1,
            "comment2": self.comment2,
            "box_origin": list(self.box_origin),
            "steps_number": list(self.steps_number),
            "steps_size": [list(v) for v in self.steps_size],
            "cube_data": self.cube_data.tolist(),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "VolumeCube":
        steps_number = [int(n) for n in d["steps_number"]]
        cube_data = np.asarray(d["cube_data"], dtype=np.float64).reshape(tuple(steps_number))
        return cls(
            comment1=d["comment1"],
            comment2=d["comment2"],
            box_origin=[float(v) for v in d["box_origin"]],
            steps_number=steps_number,
            steps_size=[[float(v) for v in row] for row in d["steps_size"]],
            cube_data=cube_data,
        )

    def to_bytes(self) -> bytes:
        return _dump(self.to_dict())

    @classmethod
    def from_bytes(cls, data: bytes) -> "VolumeCube":
        return cls.from_dict(_load(data))


PAYLOAD_TYPES = {
    MOLECULE: Molecule,
    ATOMIC_COORDINATES: AtomicCoordinates,
    VOLUME_CUBE: VolumeCube,
}


@dataclass(frozen=True)
class Node:
    """
    Generic labeled tree node.

    Attributes:
        name: Human-readable label (file name, molecule name, "Set#N", ...).
        type: Namespaced type tag describing the payload.
        data: Serialized payload, empty when the node has none.
        children: Child nodes, exclusively owned by this node.
    """

    name: str
    type: str
    data: bytes = b""
    children: Tuple["Node", ...] = ()

    def payload(self) -> Optional[Any]:
        """Decode ``data`` according to the type tag, or None if there is no payload."""
        if not self.data:
            return None
        payload_cls = PAYLOAD_TYPES.get(self.type)
        if payload_cls is None:
            return None
        return payload_cls.from_bytes(self.data)

    def walk(self, depth: int = 0) -> Iterator[Tuple[int, "Node"]]:
        yield depth, self
        for child in self.children:
            yield from child.walk(depth + 1)

    def to_dict(self) -> Dict[str, Any]:
        """Transport form; ``data`` is a list of byte values."""
        return {
            "name": self.name,
            "type": self.type,
            "data": list(self.data),
            "children": [child.to_dict() for child in self.children],
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Node":
        return cls(
            name=d["name"],
            type=d["type"],
            data=bytes(d["data"]),
            children=tuple(cls.from_dict(c) for c in d["children"]),
        )

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> "Node":
        return cls.from_dict(json.loads(text))

    def describe(self) -> Dict[str, Any]:
        """Readable form with the payload decoded in place of the raw bytes."""
        payload = self.payload()
        return {
            "name": self.name,
            "type": self.type,
            "data": payload.to_dict() if payload is not None else None,
            "children": [child.describe() for child in self.children],
        }


def coordinates_node(name: str, coords: AtomicCoordinates) -> Node:
    return Node(name=name, type=ATOMIC_COORDINATES, data=coords.to_bytes())
