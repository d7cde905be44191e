import random
from typing import List, Sequence, Tuple

from facematch.errors import InsufficientDataError
from facematch.models import Photo

CHOICES_PER_QUESTION = 4


def next_question(all_photos: Sequence[Photo], retry_queue: List[Photo], rng=random,
                  min_photos: int = CHOICES_PER_QUESTION) -> Tuple[Photo, List[Photo]]:
    """Pick the next target photo and the photos offered as choices.

    A non-empty ``retry_queue`` is consumed from the front (oldest skip
    first) and is mutated in place. Otherwise the target is drawn uniformly
    from ``all_photos``. The choice set always contains the target plus
    three distinct distractors, in shuffled order.
    """
    if len(all_photos) < max(min_photos, CHOICES_PER_QUESTION):
        raise InsufficientDataError(
            f"Please upload at least {max(min_photos, CHOICES_PER_QUESTION)} photos to start the game."
        )

    if retry_queue:
        target = retry_queue.pop(0)
    else:
        target = rng.choice(list(all_photos))

    distractors = [p for p in all_photos if p.id != target.id]
    rng.shuffle(distractors)
    choices = [target] + distractors[:CHOICES_PER_QUESTION - 1]
    rng.shuffle(choices)
    return target, choices
