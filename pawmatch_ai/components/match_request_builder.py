"""
Match Request Builder - Assessment Serialization
Composes the adopter profile and candidate list into the single
natural-language message sent to the match coordinator agent.
"""

from typing import Iterable

from ..schemas.adopter_profile import EnvironmentProfile, LifestyleProfile
from ..schemas.candidate import CandidateAnimal
from ..utils.helpers import activity_label, experience_label, format_choice, format_number


def describe_candidate(index: int, candidate: CandidateAnimal) -> str:
    """
    Render one candidate clause.

    Args:
        index: 1-based position in the registry
        candidate: Candidate to describe

    Returns:
        e.g. "1) Max - 3 year old Dog, High energy, loves fetch."
    """
    special_needs = f", special needs: {candidate.special_needs}" if candidate.special_needs else ""
    return (
        f"{index}) {candidate.name} - {candidate.age_years} year old {candidate.species.value}, "
        f"{candidate.energy_level.value} energy, {candidate.key_traits}{special_needs}."
    )


def build_match_request(
    lifestyle: LifestyleProfile,
    environment: EnvironmentProfile,
    candidates: Iterable[CandidateAnimal],
) -> str:
    """
    Build the assessment message for the match coordinator.

    Args:
        lifestyle: Adopter lifestyle answers
        environment: Adopter environment answers
        candidates: Candidates in registry order

    Returns:
        Submission message
    """
    yard = " with a yard" if environment.has_yard else ""
    message = (
        f"I have a {environment.space_size_sq_ft} sq ft {format_choice(environment.home_type)}{yard}."
        f" I work {format_choice(lifestyle.work_schedule)} ({format_choice(lifestyle.work_hours)})"
        f" and have time for {format_number(lifestyle.available_time_hours)} hours of pet care daily."
        f" I'm {activity_label(lifestyle.activity_level).lower()}"
        f" and travel {format_choice(lifestyle.travel_frequency)}."
        f" My experience level is {experience_label(environment.experience_level).lower()}."
    )

    if environment.other_pets is not None:
        message += f" I have other pets: {environment.other_pets}."

    if environment.children is not None:
        message += f" Children: {environment.children}."
    else:
        message += " No children."

    animal_descriptions = " ".join(
        describe_candidate(index, candidate)
        for index, candidate in enumerate(candidates, start=1)
    )
    message += f" I'm looking to match with these rescue animals: {animal_descriptions}"

    return message
