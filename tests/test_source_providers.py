import unittest
from datetime import datetime

from jobfeed.core.listing import JobType, Source
from jobfeed.providers import REGISTRY, get
from jobfeed.providers.scout import ScoutProvider
from jobfeed.providers.simplify import SimplifyProvider
from jobfeed.providers.speedyapply import SpeedyApplyProvider
from jobfeed.providers.tables import Cell, Hyperlink, extract_tables

NOW = datetime(2024, 6, 10, 9, 0, 0)


def cell(text, href=None):
    return Cell(text=text, hyperlinks=[Hyperlink(href=href, text=text)] if href else [])


class RegistryTests(unittest.TestCase):
    def test_one_provider_per_source(self):
        self.assertEqual(set(REGISTRY), set(Source))
        self.assertIsInstance(get("scout"), ScoutProvider)
        self.assertIsInstance(get(Source.SPEEDYAPPLY), SpeedyApplyProvider)
        self.assertIsInstance(get("simplify"), SimplifyProvider)


class ScoutProviderTests(unittest.TestCase):
    def setUp(self):
        self.provider = ScoutProvider()

    def test_ditto_inherits_previous_company(self):
        rows = [
            [cell("🔥 Acme"), cell("SWE Intern"), cell("NYC"), cell("Apply", "https://acme.com/1"), cell("3d")],
            [cell("↳"), cell("Data Intern"), cell("Remote"), cell("Apply", "https://acme.com/2"), cell("today")],
            [cell("Beta"), cell("ML Intern"), cell("SF"), cell("closed"), cell("1d")],
            [cell("↳"), cell("Infra Intern"), cell(""), cell("Apply", "https://beta.io/x"), cell("bad")],
        ]
        listings = self.provider.parse_rows(rows, now=NOW)

        self.assertEqual([l.company for l in listings], ["Acme", "Acme", "Beta"])
        self.assertEqual([l.title for l in listings], ["SWE Intern", "Data Intern", "Infra Intern"])
        self.assertEqual(listings[0].date_posted.display, "06/07/2024")
        self.assertEqual(listings[1].date_posted.instant, datetime(2024, 6, 10))
        self.assertEqual(listings[2].date_posted.display, "bad")
        self.assertTrue(listings[2].date_posted.is_unknown)
        for listing in listings:
            self.assertEqual(listing.source, Source.SCOUT)
            self.assertEqual(listing.job_type, JobType.INTERNSHIP)
            self.assertEqual(listing.salary, "")

    def test_ditto_without_previous_company_is_skipped(self):
        rows = [[cell("↳"), cell("SWE Intern"), cell("NYC"), cell("Apply", "https://acme.com/1"), cell("1d")]]
        self.assertEqual(self.provider.parse_rows(rows, now=NOW), [])

    def test_mis_decoded_ditto_marker(self):
        rows = [
            [cell("Acme"), cell("SWE Intern"), cell("NYC"), cell("Apply", "https://acme.com/1"), cell("1d")],
            [cell("â†³"), cell("PM Intern"), cell("NYC"), cell("Apply", "https://acme.com/3"), cell("1d")],
        ]
        listings = self.provider.parse_rows(rows, now=NOW)
        self.assertEqual([l.company for l in listings], ["Acme", "Acme"])

    def test_absurd_age_keeps_the_row_with_unknown_date(self):
        rows = [[cell("Acme"), cell("SWE Intern"), cell("NYC"), cell("Apply", "https://acme.com/1"), cell("99999999999d")]]
        listings = self.provider.parse_rows(rows, now=NOW)
        self.assertEqual(len(listings), 1)
        self.assertTrue(listings[0].date_posted.is_unknown)
        self.assertEqual(listings[0].date_posted.display, "99999999999d")

    def test_short_rows_are_skipped(self):
        rows = [[cell("Acme"), cell("SWE Intern")], []]
        self.assertEqual(self.provider.parse_rows(rows, now=NOW), [])

    def test_parses_extracted_markdown(self):
        md = (
            "| Company | Role | Location | Application/Link | Date Posted |\n"
            "| --- | --- | --- | --- | --- |\n"
            "| **Acme** | SWE Intern | NYC | [Apply](HTTPS://WWW.ACME.COM/jobs/1) | 2d |\n"
            "| ↳ | Data Intern | Remote | [Apply](https://acme.com/jobs/2) | 5d |\n"
        )
        rows = [row for table in extract_tables(md) for row in table]
        listings = self.provider.parse_rows(rows, now=NOW)
        self.assertEqual(len(listings), 2)
        self.assertEqual(listings[0].link, "https://www.acme.com/jobs/1")
        self.assertEqual(listings[1].company, "Acme")
        self.assertEqual(listings[1].date_posted.display, "06/05/2024")


class SpeedyApplyProviderTests(unittest.TestCase):
    def setUp(self):
        self.provider = SpeedyApplyProvider()

    def test_salary_column_shifts_link_and_age(self):
        rows = [
            [cell("Acme"), cell("SWE Intern"), cell("NYC"), cell("$45/hr"), cell("Apply", "https://acme.com/1"), cell("2d")],
            [cell("Beta"), cell("Data Intern"), cell("Remote"), cell("Apply", "https://beta.io/2"), cell("5d")],
        ]
        acme, beta = self.provider.parse_rows(rows, now=NOW)

        self.assertEqual(acme.salary, "$45/hr")
        self.assertEqual(acme.link, "https://acme.com/1")
        self.assertEqual(acme.date_posted.display, "06/08/2024")

        self.assertEqual(beta.salary, "")
        self.assertEqual(beta.link, "https://beta.io/2")
        self.assertEqual(beta.date_posted.display, "06/05/2024")
        self.assertEqual(beta.source, Source.SPEEDYAPPLY)
        self.assertEqual(beta.job_type, JobType.INTERNSHIP)

    def test_salary_row_without_link_is_skipped(self):
        rows = [[cell("Gamma"), cell("QA Intern"), cell("Austin"), cell("$30/hr"), cell("closed"), cell("1d")]]
        self.assertEqual(self.provider.parse_rows(rows, now=NOW), [])

    def test_company_emoji_is_stripped(self):
        rows = [[cell("Delta 🛂"), cell("SWE Intern"), cell("NYC"), cell("Apply", "https://delta.com/"), cell("1d")]]
        (listing,) = self.provider.parse_rows(rows, now=NOW)
        self.assertEqual(listing.company, "Delta")


class SimplifyProviderTests(unittest.TestCase):
    def setUp(self):
        self.provider = SimplifyProvider()

    def test_link_found_in_any_column(self):
        rows = [
            [cell("Acme"), cell("New Grad SWE"), cell("NYC"), cell("$120k"), cell("0d"), cell("Apply", "https://acme.com/a")],
            [cell("Beta", "https://beta.io/jobs/1"), cell("Backend Engineer"), cell("Remote"), cell(""), cell("Sep 1")],
        ]
        acme, beta = self.provider.parse_rows(rows, now=NOW)

        self.assertEqual(acme.link, "https://acme.com/a")
        self.assertEqual(acme.salary, "$120k")
        self.assertEqual(acme.date_posted.instant, datetime(2024, 6, 10))
        self.assertEqual(beta.link, "https://beta.io/jobs/1")
        self.assertEqual(beta.date_posted.display, "09/01/2023")
        self.assertEqual(acme.job_type, JobType.NEWGRAD)
        self.assertEqual(beta.source, Source.SIMPLIFY)

    def test_relative_link_is_kept_as_is(self):
        rows = [[cell("Acme"), cell("New Grad SWE"), cell("NYC"), cell(""), cell("1d"), cell("Apply", "/jobs/1")]]
        (listing,) = self.provider.parse_rows(rows, now=NOW)
        self.assertEqual(listing.link, "/jobs/1")

    def test_row_missing_title_is_skipped(self):
        rows = [[cell("Acme"), cell(""), cell("NYC"), cell(""), cell("1d"), cell("Apply", "https://acme.com/a")]]
        self.assertEqual(self.provider.parse_rows(rows, now=NOW), [])


if __name__ == "__main__":
    unittest.main()
