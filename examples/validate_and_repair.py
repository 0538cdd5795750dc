"""
Example: Validating and repairing a GEDCOM document.

This example demonstrates how to:
1. Build (or load) a document
2. Validate it and inspect the findings
3. Repair it in place with autorepair
4. Re-validate the repaired document
"""

from gedcom_validator import Gedcom, GedcomValidator, Severity, StringWithCustomTags, Submitter


def example_validate_and_repair():
    """Example workflow: validate, repair, re-validate."""

    # Step 1: Build a document with a few defects
    # (use GedcomLoader('family.ged').load() for a real file)
    gedcom = load_sample_document()

    # Step 2: Validate without touching the document
    print("=== Validation ===")
    validator = GedcomValidator(gedcom=gedcom, autorepair=False)
    findings = validator.validate()
    print(findings)
    if findings.has(Severity.ERROR, "copyright"):
        print("Copyright data is missing")

    # Step 3: Repair what can be repaired safely
    print("\n=== Repair ===")
    validator.autorepair = True
    findings = validator.validate()
    for finding in findings.infos:
        print(f"Repaired: {finding.message}")

    # Step 4: Whatever is left needs a human
    print("\n=== Re-validation ===")
    validator.autorepair = False
    findings = validator.validate()
    print(f"Findings: {findings.counts()}")
    print(findings)


def load_sample_document():
    """Sample document: no character set, no copyright data, a blank destination and unset submitter custom tags."""
    gedcom = Gedcom()
    submitter = gedcom.add_submitter(Submitter(xref='@SUBM0001@', name=StringWithCustomTags('Jane /Smith/')))
    submitter.custom_tags = None
    gedcom.header.character_set = None
    gedcom.header.copyright_data = None
    gedcom.header.submitter = submitter
    gedcom.header.destination_system = StringWithCustomTags('')
    return gedcom


if __name__ == '__main__':
    example_validate_and_repair()
