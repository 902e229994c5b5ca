"""
Unit tests for geometry, flow, fluid and pressure-drop primitives.
"""

import unittest

from headloss.flow import flow_rate_cfs, shear_rate
from headloss.fluid_properties import (
    get_fluid_name, get_fluid_options, get_fluid_properties, kinematic_viscosity,
)
from headloss.pipe_lookup import get_nominal_pipe_size, get_nominal_sizes, get_pipe_id
from headloss.pressure_drop import (
    head_loss, pressure_drop, relative_roughness, reynolds_number,
)
from headloss.velocity import diameter_in_feet, flow_area, velocity


class TestGeometry(unittest.TestCase):
    """Test diameter, area and velocity."""

    def test_diameter_in_feet(self):
        """Test inch to foot conversion at 4 significant figures."""
        self.assertEqual(diameter_in_feet(12), 1.0)
        self.assertEqual(diameter_in_feet(4), 0.3333)
        self.assertEqual(diameter_in_feet(6.065), 0.5054)

    def test_flow_area(self):
        """Test circular area at 3 significant figures."""
        self.assertEqual(flow_area(0.3333), 0.0872)
        self.assertEqual(flow_area(1.0), 0.785)

    def test_velocity(self):
        """Test velocity at 3 significant figures."""
        self.assertEqual(velocity(0.2228, 0.0872), 2.56)


class TestFlow(unittest.TestCase):
    """Test flow conversions."""

    def test_flow_rate_cfs(self):
        """Test GPM to ft³/s."""
        self.assertEqual(flow_rate_cfs(100), 0.2228)
        self.assertEqual(flow_rate_cfs(448.831), 1.0)
        self.assertEqual(flow_rate_cfs(0), 0.0)

    def test_shear_rate(self):
        """Test shear rate at 5 significant figures."""
        self.assertEqual(shear_rate(100, 4), 61.25)


class TestFluidProperties(unittest.TestCase):
    """Test kinematic viscosity and fluid presets."""

    def test_kinematic_viscosity_water(self):
        """Test 1 cP, SG 1.0."""
        self.assertAlmostEqual(kinematic_viscosity(1, 1.0), 1.077393e-5, places=11)

    def test_kinematic_viscosity_scales(self):
        """Viscosity scales up, specific gravity scales down."""
        self.assertAlmostEqual(kinematic_viscosity(100, 1.0), 1.077393e-3, places=9)
        self.assertLess(kinematic_viscosity(1, 1.2), kinematic_viscosity(1, 1.0))

    def test_presets(self):
        """Test fluid preset lookups."""
        self.assertIn('water', get_fluid_options())
        self.assertEqual(get_fluid_properties('water'), (1.12, 1.0))
        self.assertEqual(get_fluid_name('glycol_30'), '30% Ethylene Glycol')
        self.assertEqual(get_fluid_name('unknown'), 'unknown')

    def test_unknown_fluid(self):
        """Unknown fluid raises ValueError."""
        with self.assertRaises(ValueError):
            get_fluid_properties('mercury')


class TestPipeLookup(unittest.TestCase):
    """Test nominal pipe size lookups."""

    def test_get_pipe_id(self):
        self.assertEqual(get_pipe_id('4"'), 4.026)
        self.assertIsNone(get_pipe_id('7"'))

    def test_get_nominal_pipe_size(self):
        """Smallest size with ID >= requested diameter."""
        self.assertEqual(get_nominal_pipe_size(4.0), '4"')
        self.assertEqual(get_nominal_pipe_size(4.026), '4"')
        self.assertEqual(get_nominal_pipe_size(4.1), '5"')
        self.assertEqual(get_nominal_pipe_size(100), '48"')

    def test_get_nominal_sizes_ordered(self):
        sizes = get_nominal_sizes()
        self.assertEqual(sizes[0], '1/2"')
        self.assertEqual(sizes[-1], '48"')
        ids = [get_pipe_id(s) for s in sizes]
        self.assertEqual(ids, sorted(ids))


class TestPressureDrop(unittest.TestCase):
    """Test Reynolds number, roughness, head loss and pressure drop."""

    def test_reynolds_number(self):
        """Test Reynolds number at 4 significant figures."""
        self.assertEqual(reynolds_number(0.3333, 2.56, 1.077393e-5), 79200.0)

    def test_relative_roughness(self):
        """Test ε/D at 4 decimal places."""
        self.assertEqual(relative_roughness(0.3333), 0.0)
        self.assertEqual(relative_roughness(0.001), 0.015)

    def test_head_loss(self):
        """Test head loss at 2 significant figures."""
        self.assertEqual(head_loss(0.0192, 100, 2.56, 0.3333, 0), 0.59)
        self.assertEqual(head_loss(0.0192, 100, 2.56, 0.3333, 10), 11.0)

    def test_pressure_drop(self):
        """Test head to psi conversion."""
        self.assertEqual(pressure_drop(0.59, 1.0), 0.26)
        self.assertEqual(pressure_drop(2.31, 1.0), 1.0)
        self.assertEqual(pressure_drop(2.31, 1.5), 1.5)


if __name__ == '__main__':
    unittest.main()
