import unittest

from hostman.errors import (
    BadFormatError,
    EmptyLineError,
    MissingFieldsError,
    SuperfluousCommentError,
)
from hostman.models import Entry
from hostman.parser import parse_add_spec, parse_line, serialize_entry


class ParseLineTest(unittest.TestCase):
    def test_parses_entry_with_aliases(self):
        entry = parse_line("127.0.0.1  example.com www.example.com")

        self.assertEqual("127.0.0.1", entry.address)
        self.assertEqual("example.com", entry.domain)
        self.assertEqual(("www.example.com",), entry.aliases)
        self.assertFalse(entry.disabled)
        self.assertEqual("127.0.0.1\texample.com www.example.com", entry.raw)

    def test_mixed_separators_collapse(self):
        entry = parse_line("  ::1\t \tlocalhost   ip6-localhost\tip6-loopback \n")

        self.assertEqual("::1", entry.address)
        self.assertEqual(("ip6-localhost", "ip6-loopback"), entry.aliases)
        self.assertEqual("::1\tlocalhost ip6-localhost ip6-loopback", entry.raw)

    def test_disabled_line(self):
        entry = parse_line("#1.2.3.4\texample.com")

        self.assertTrue(entry.disabled)
        self.assertEqual("1.2.3.4", entry.address)
        self.assertEqual("1.2.3.4\texample.com", entry.raw)
        self.assertEqual("#1.2.3.4\texample.com", serialize_entry(entry))

    def test_rejects_empty_line(self):
        with self.assertRaises(EmptyLineError):
            parse_line(" \t \n")

    def test_rejects_comment_line(self):
        with self.assertRaises(SuperfluousCommentError):
            parse_line("# The following lines are desirable for IPv6")

    def test_rejects_single_field(self):
        with self.assertRaises(MissingFieldsError):
            parse_line("127.0.0.1")

    def test_rejects_bare_marker_as_address(self):
        with self.assertRaises(MissingFieldsError):
            parse_line("#\texample.com")

    def test_rejects_doubled_marker(self):
        with self.assertRaises(MissingFieldsError):
            parse_line("##1.2.3.4 example.com")

    def test_serialize_then_parse_is_stable(self):
        for line in (
            "10.0.0.1 a.test",
            "#10.0.0.2    b.test c.test d.test",
            "fe80::1%lo0\tlocalhost",
        ):
            entry = parse_line(line)
            again = parse_line(serialize_entry(entry))
            self.assertEqual(entry, again)
            self.assertEqual(serialize_entry(entry), serialize_entry(again))


class EntryTest(unittest.TestCase):
    def test_requires_address_and_domain(self):
        with self.assertRaises(ValueError):
            Entry(address="", domain="example.com")
        with self.assertRaises(ValueError):
            Entry(address="127.0.0.1", domain="")

    def test_raw_follows_aliases(self):
        entry = Entry("127.0.0.1", "a.test", ["b.test", "c.test"])
        self.assertEqual("127.0.0.1\ta.test b.test c.test", entry.raw)

        trimmed = entry.without_alias("b.test")
        self.assertEqual("127.0.0.1\ta.test c.test", trimmed.raw)
        self.assertEqual(("b.test", "c.test"), entry.aliases)

    def test_disabled_is_not_part_of_raw(self):
        entry = Entry("127.0.0.1", "a.test")
        self.assertEqual(entry.raw, entry.with_disabled(True).raw)
        self.assertEqual("#127.0.0.1\ta.test", entry.with_disabled(True).to_hosts_line())


class ParseAddSpecTest(unittest.TestCase):
    def test_domain_and_aliases(self):
        entry = parse_add_spec("127.0.0.1@example.com,example.org")

        self.assertEqual("127.0.0.1", entry.address)
        self.assertEqual("example.com", entry.domain)
        self.assertEqual(("example.org",), entry.aliases)
        self.assertEqual("127.0.0.1\texample.com example.org", entry.raw)

    def test_ipv6_address(self):
        entry = parse_add_spec("fe80::1@router.lan")
        self.assertEqual("fe80::1", entry.address)

    def test_rejects_bad_format(self):
        for spec in (
            "127.0.0.1",
            "127.0.0.1@",
            "1.1@short.test",
            "FE80::1@upper.test",
            "127.0.0.1@bad domain",
            "127.0.0.1@example.com\n",
        ):
            with self.assertRaises(BadFormatError, msg=spec):
                parse_add_spec(spec)

    def test_rejects_spec_without_domain(self):
        with self.assertRaises(MissingFieldsError):
            parse_add_spec("127.0.0.1@,")


if __name__ == "__main__":
    unittest.main()
