"""
Tree Damage Classifier Module — Who owns the tree decides who pays.

A municipal tree means a claim against the city (short notice periods,
non-repair liability standards). A private tree means a claim against the
neighbouring occupier under the Occupiers' Liability Act. A utility tree
means the utility's claims process. Five guides walk through ownership,
the resulting route, the negligence standard, evidence and forum.
"""

from __future__ import annotations

from legal_navigator.domains.base import BaseDomainModule, section
from legal_navigator.matter.schema import Domain, DocumentDraft, DomainModuleInput


class TreeDamageClassifierModule(BaseDomainModule):
    domain = Domain.TREE_DAMAGE

    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        refs = data.primary_evidence_refs()
        return [
            self.draft(
                data,
                "Identifying Tree Ownership - Municipal, Private, or Public Utility",
                [
                    section(
                        "Municipal Trees",
                        "Trees on the road allowance between sidewalk and street are usually "
                        "city-owned. Calling 311 and asking for written confirmation settles it.",
                        confirmed=True,
                    ),
                    section(
                        "Private Trees",
                        "A tree whose trunk stands on a neighbour's lot belongs to that owner. "
                        "A survey or deed plan shows the boundary.",
                        refs,
                    ),
                    section(
                        "Utility Trees",
                        "Trees in hydro corridors or trimmed by the utility may be the "
                        "utility's responsibility.",
                        confirmed=True,
                    ),
                ],
            ),
            self.draft(
                data,
                "Municipal vs Private Tree Damage - Quick Decision Tree",
                [
                    section(
                        "Decision Tree",
                        "Municipal tree: written notice to the municipality within 10 days of "
                        "the damage, then a claim. Private tree: demand letter to the owner, then "
                        "Small Claims Court.",
                        confirmed=True,
                    ),
                    section(
                        "Municipal Claims",
                        "A municipality is liable where it knew or ought to have known the tree "
                        "was hazardous and failed to act within a reasonable time.",
                        refs,
                    ),
                ],
            ),
            self.draft(
                data,
                "Occupiers' Liability Act - Ontario Tree Negligence Standards",
                [
                    section(
                        "Occupiers' Liability Act, R.S.O. 1990, c. O.2",
                        "An occupier owes a duty to take reasonable care that persons and their "
                        "property are reasonably safe. A visibly dead or diseased tree left "
                        "standing can breach that duty.",
                        confirmed=True,
                    ),
                    section(
                        "Reasonable Maintenance",
                        "Evidence of prior warnings, visible decay, or earlier limb failures "
                        "supports a finding that the danger was foreseeable.",
                        refs,
                    ),
                ],
            ),
            self.draft(
                data,
                "Evidence Checklist for Tree Damage Claims",
                [
                    section(
                        "Critical Evidence",
                        "Dated photos of the tree and the damage, repair estimates and receipts, "
                        "weather records for the day, and any prior complaints about the tree.",
                        refs,
                    ),
                    section(
                        "Professional Evidence",
                        "A certified arborist's report on the tree's condition before failure is "
                        "often the deciding evidence.",
                    ),
                ],
            ),
            self.draft(
                data,
                "Forum Selection and Process Overview",
                [
                    section(
                        "Forum Options",
                        "Municipal claims process for city trees. Small Claims Court for claims "
                        "up to $50,000. Superior Court of Justice for larger or complex claims.",
                        confirmed=True,
                    ),
                    section(
                        "Next Steps",
                        "Confirm ownership, gather evidence, send written notice or a demand "
                        "letter, and keep copies of everything sent.",
                    ),
                ],
            ),
        ]
