import pytest

from aocsolver.y2020.day4 import Passport, parse_passports, part_1, part_2

PART_1_EXAMPLE = """\
ecl:gry pid:860033327 eyr:2020 hcl:#fffffd
byr:1937 iyr:2017 cid:147 hgt:183cm

iyr:2013 ecl:amb cid:350 eyr:2023 pid:028048884
hcl:#cfa07d byr:1929

hcl:#ae17e1 iyr:2013
eyr:2024
ecl:brn pid:760753704 byr:1931
hgt:179cm

hcl:#cfa07d eyr:2025 pid:166559648
iyr:2011 ecl:brn hgt:59in
"""

INVALID = """\
eyr:1972 cid:100
hcl:#18171d ecl:amb hgt:170 pid:186cm iyr:2018 byr:1926

iyr:2019
hcl:#602927 eyr:1967 hgt:170cm
ecl:grn pid:012533040 byr:1946

hcl:dab227 iyr:2012
ecl:brn hgt:182cm pid:021572410 eyr:2020 byr:1992 cid:277

hgt:59cm ecl:zzz
eyr:2038 hcl:74454a iyr:2023
pid:3556412378 byr:2007
"""

VALID = """\
pid:087499704 hgt:74in ecl:grn iyr:2012 eyr:2030 byr:1980
hcl:#623a2f

eyr:2029 ecl:blu cid:129 byr:1989
iyr:2014 pid:896056539 hcl:#a97842 hgt:165cm

hcl:#888785
hgt:164cm byr:2001 iyr:2015 cid:88
pid:545766238 ecl:hzl
eyr:2022

iyr:2010 hgt:158cm hcl:#b6652c ecl:blu byr:1944 eyr:2021 pid:093154719
"""

BASE_FIELDS = {
    "pid": "087499704",
    "hgt": "74in",
    "ecl": "grn",
    "iyr": "2012",
    "eyr": "2030",
    "byr": "1980",
    "hcl": "#623a2f",
}


def test_parse_passports_groups_lines():
    passports = parse_passports("a:1 b:2\nc:3\n\nd:4\n")
    assert [p.fields for p in passports] == [{"a": "1", "b": "2", "c": "3"}, {"d": "4"}]


def test_part_1_example():
    assert part_1(PART_1_EXAMPLE) == 2


def test_invalid_examples():
    assert part_2(INVALID) == 0


def test_valid_examples():
    assert part_2(VALID) == len(parse_passports(VALID))


@pytest.mark.parametrize(
    "key, value, expected",
    [
        ("byr", "2002", True),
        ("byr", "2003", False),
        ("hgt", "60in", True),
        ("hgt", "190cm", True),
        ("hgt", "190in", False),
        ("hgt", "190", False),
        ("hcl", "#123abc", True),
        ("hcl", "#123abz", False),
        ("hcl", "123abc", False),
        ("ecl", "brn", True),
        ("ecl", "wat", False),
        ("pid", "000000001", True),
        ("pid", "0123456789", False),
    ],
)
def test_field_rules(key, value, expected):
    passport = Passport({**BASE_FIELDS, key: value})
    assert passport.is_valid() is expected


def test_missing_field_fails_both_checks():
    fields = dict(BASE_FIELDS)
    del fields["hcl"]
    passport = Passport(fields)
    assert passport.has_required_fields() is False
    assert passport.is_valid() is False


def test_non_numeric_year_raises():
    with pytest.raises(ValueError):
        Passport({**BASE_FIELDS, "byr": "year"}).is_valid()


def test_pair_without_colon_raises():
    with pytest.raises(ValueError):
        parse_passports("byr1980\n")