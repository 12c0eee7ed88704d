from datetime import datetime

import pytest

from polymath.life_records import (
    BirthChart,
    Blood,
    CelestialPosition,
    Chromosome,
    DnaStrand,
    Genome,
    MoleculeSpace,
    PersonalInformation,
    Protein,
    RnaStrand,
    Virus,
)


def test_dna_strand_is_upper_cased():
    assert DnaStrand("acgt").strand == "ACGT"


def test_dna_strand_rejects_uracil():
    with pytest.raises(ValueError):
        DnaStrand("ACGU")


def test_rna_strand_rejects_thymine():
    with pytest.raises(ValueError):
        RnaStrand("ACGT")


def test_protein_checks_each_strand():
    protein = Protein(mrna="augc", rna="ACGU", dna="TTGA")
    assert protein.mrna == "AUGC"
    with pytest.raises(ValueError):
        Protein(dna="XYZ")


def test_virus_rejects_bad_mrna():
    with pytest.raises(ValueError):
        Virus(mrna="ATG")


def test_blood_type_validation():
    assert Blood(blood_type="O-").blood_type == "O-"
    with pytest.raises(ValueError):
        Blood(blood_type="C+")
    with pytest.raises(ValueError):
        Blood(blood_flow_speed=-1)


def test_genome_keeps_text():
    assert Genome("GATTACA").genome == "GATTACA"


def test_chromosome_rejects_bad_strand():
    with pytest.raises(ValueError):
        Chromosome(x_dna="ACGT", y_dna="ACGN")


def test_molecule_space_zero_fills_views():
    space = MoleculeSpace(3)
    for view in (space.x_view, space.y_view, space.z_view):
        assert len(view) == 3
        assert all(row == [0, 0, 0] for row in view)


def test_molecule_space_rejects_wrong_view():
    with pytest.raises(ValueError):
        MoleculeSpace(2, x_view=[[1, 2, 3], [4, 5, 6]])


def test_personal_information_birth_moment():
    person = PersonalInformation("Ada", 10, 12, 1990, 6, 15, 30, 51.5, -0.1)
    assert person.birth_moment == datetime(1990, 12, 10, 6, 15, 30)


def test_personal_information_rejects_invalid_date_and_place():
    with pytest.raises(ValueError):
        PersonalInformation("Ada", 1, 13, 1990)
    with pytest.raises(ValueError):
        PersonalInformation("Ada", 1, 1, 1990, latitude=91)


def test_celestial_position_decimal_degrees():
    assert CelestialPosition(10, 30, 0).decimal_degrees() == pytest.approx(10.5)
    assert CelestialPosition(-10, 30, 0).decimal_degrees() == pytest.approx(-10.5)


def test_celestial_position_rejects_sixty_minutes():
    with pytest.raises(ValueError):
        CelestialPosition(1, 60, 0)


def test_birth_chart_holds_positions():
    person = PersonalInformation("Ada", 1, 1, 2000)
    sun = CelestialPosition(280, 15, 0)
    chart = BirthChart(person, sun=sun)
    assert chart.sun == sun
    assert chart.moon == CelestialPosition()
    assert chart.person.name == "Ada"