import random
from typing import List, Optional, Tuple

from faker import Faker

from .models import Exam, Teacher, make_exam, make_teacher

SUBJECTS = [
    "Mathematics", "Physics", "Chemistry", "Biology", "History", "Geography",
    "Literature", "Economics", "Computer Science", "Philosophy", "Art", "Music",
]


def generate_instance(n_exams: int, n_slots: int = 4, n_teachers: int = 5,
                      unavailability: float = 0.2,
                      seed: Optional[int] = None) -> Tuple[List[Exam], List[Teacher]]:
    """Random exams spread over ``n_slots`` slots and teachers with random gaps.

    Each teacher misses each slot independently with probability
    ``unavailability``.
    """
    if n_slots < 1:
        raise ValueError("n_slots must be at least 1")
    rng = random.Random(seed)
    fake = Faker()
    Faker.seed(seed)
    slots = [f"S{i}" for i in range(n_slots)]
    exams = [
        make_exam(i, f"{rng.choice(SUBJECTS)} {i}", rng.choice(slots))
        for i in range(n_exams)
    ]
    teachers = [
        make_teacher(i, fake.name(), {s for s in slots if rng.random() < unavailability})
        for i in range(n_teachers)
    ]
    return exams, teachers
