import json
import unittest

import numpy as np

from chemistry_importer.models import (
    ATOMIC_COORDINATES,
    MOLECULE,
    UNEX,
    VOLUME_CUBE,
    AtomicCoordinates,
    Molecule,
    Node,
    VolumeCube,
    coordinates_node,
)


class TestAtomicCoordinates(unittest.TestCase):

    def test_bytes_round_trip_is_exact(self):
        coords = AtomicCoordinates(
            atomic_num=[8, 1, -1, -2],
            x=[0.1, 1.0 / 3.0, -0.0, 1e-300],
            y=[2.5e10, -7.25, 0.529177210903, 0.0],
            z=[0.0, 0.0, 0.0, 123456.789],
        )
        again = AtomicCoordinates.from_bytes(coords.to_bytes())

        self.assertEqual(again.atomic_num, coords.atomic_num)
        for axis in ("x", "y", "z"):
            self.assertEqual(
                [v.hex() for v in getattr(again, axis)],
                [v.hex() for v in getattr(coords, axis)],
            )

    def test_unequal_lengths_rejected(self):
        with self.assertRaises(ValueError):
            AtomicCoordinates(atomic_num=[1, 1], x=[0.0], y=[0.0, 0.0], z=[0.0, 0.0])

    def test_empty_set_allowed(self):
        coords = AtomicCoordinates(atomic_num=[], x=[], y=[], z=[])
        self.assertEqual(coords.n_atoms, 0)
        self.assertEqual(AtomicCoordinates.from_bytes(coords.to_bytes()), coords)

    def test_payload_is_utf8_json(self):
        coords = AtomicCoordinates(atomic_num=[6], x=[1.0], y=[2.0], z=[3.0])
        decoded = json.loads(coords.to_bytes().decode("utf-8"))
        self.assertEqual(decoded, {"atomic_num": [6], "x": [1.0], "y": [2.0], "z": [3.0]})


class TestMolecule(unittest.TestCase):

    def test_defaults(self):
        molecule = Molecule()
        self.assertEqual(molecule.n_atoms, 0)
        self.assertEqual(molecule.atomic_num, [])
        self.assertEqual(molecule.charge, 0)
        self.assertEqual(molecule.name, "")

    def test_round_trip(self):
        molecule = Molecule(n_atoms=3, atomic_num=[8, 1, 1], charge=-1, name="water")
        self.assertEqual(Molecule.from_bytes(molecule.to_bytes()), molecule)


class TestVolumeCube(unittest.TestCase):

    def test_round_trip_restores_grid_shape(self):
        cube = VolumeCube(
            comment1="c1",
            comment2="c2",
            box_origin=[0.0, 0.0, 0.0],
            steps_number=[2, 1, 3],
            steps_size=[[0.2, 0.0, 0.0], [0.0, 0.2, 0.0], [0.0, 0.0, 0.2]],
            cube_data=np.arange(6, dtype=np.float64).reshape(2, 1, 3),
        )
        again = VolumeCube.from_bytes(cube.to_bytes())

        self.assertEqual(again.cube_data.shape, (2, 1, 3))
        self.assertTrue(np.array_equal(again.cube_data, cube.cube_data))
        self.assertEqual(again.steps_size, cube.steps_size)
        self.assertEqual(again.comment2, "c2")


class TestNode(unittest.TestCase):

    def _tree(self):
        coords = AtomicCoordinates(atomic_num=[1, 1], x=[0.0, 0.0], y=[0.0, 0.0], z=[0.0, 0.74])
        molecule = Molecule(n_atoms=2, atomic_num=[1, 1], name="h2.xyz")
        return Node(
            name="h2.xyz",
            type=MOLECULE,
            data=molecule.to_bytes(),
            children=(coordinates_node("hydrogen", coords),),
        )

    def test_payload_decoding(self):
        tree = self._tree()
        self.assertIsInstance(tree.payload(), Molecule)
        self.assertEqual(tree.children[0].type, ATOMIC_COORDINATES)
        self.assertEqual(tree.children[0].payload().z, [0.0, 0.74])

    def test_payload_absent(self):
        self.assertIsNone(Node(name="log", type=UNEX).payload())
        self.assertIsNone(Node(name="grid", type=VOLUME_CUBE).payload())

    def test_json_round_trip(self):
        tree = self._tree()
        self.assertEqual(Node.from_json(tree.to_json(indent=2)), tree)

    def test_wire_form_has_byte_list(self):
        wire = self._tree().to_dict()
        self.assertIsInstance(wire["data"], list)
        self.assertTrue(all(isinstance(b, int) and 0 <= b < 256 for b in wire["data"]))
        self.assertEqual(bytes(wire["data"]).decode("utf-8")[0], "{")

    def test_walk_is_preorder_with_depth(self):
        tree = self._tree()
        self.assertEqual(
            [(depth, node.name) for depth, node in tree.walk()],
            [(0, "h2.xyz"), (1, "hydrogen")],
        )

    def test_describe_decodes_payloads(self):
        described = self._tree().describe()
        self.assertEqual(described["data"]["name"], "h2.xyz")
        self.assertEqual(described["children"][0]["data"]["atomic_num"], [1, 1])
        self.assertEqual(described["children"][0]["children"], [])


if __name__ == "__main__":
    unittest.main()
