from typing import Iterable, Optional, Tuple

from readgraph.data.catalog import Catalog

MEDIUM_BOOKS = [
    "Don Quixote",
    "Alice's Adventures in Wonderland",
    "The Adventures of Huckleberry Finn",
    "Wuthering Heights",
    "Jane Eyre",
    "The Scarlet Letter",
    "Moby Dick",
    "Great Expectations",
    "Frankenstein, or, the Modern Prometheus",
    "The Wind in the Willows",
    "The Great Gatsby",
    "The House of the Seven Gables",
    "Gone with the Wind",
    "Lord of the Flies",
    "All Quiet on the Western Front",
    "The Color Purple",
    "To the Lighthouse",
    "East of Eden",
    "Anna Karenina",
    "Fahrenheit 451",
    "White Fang",
    "The Magician's Nephew",
    "Doctor Zhivago",
    "Beloved",
    # registered twice
    "Frankenstein, or, the Modern Prometheus",
]

MEDIUM_READS = [
    ("Shreya Bastia", "Don Quixote"),
    ("Shreya Bastia", "Alice's Adventures in Wonderland"),
    ("Devansh Bansal", "Alice's Adventures in Wonderland"),
    ("Devansh Bansal", "Moby Dick"),
    ("Devansh Bansal", "Don Quixote"),
    ("Aditya Sahu", "Don Quixote"),
    ("Aditya Sahu", "The Adventures of Huckleberry Finn"),
    ("Goutam Kumar Nayak", "Wuthering Heights"),
    ("Goutam Kumar Nayak", "Jane Eyre"),
    ("Goutam Kumar Nayak", "Don Quixote"),
    ("Saroj Mohapatra", "Moby Dick"),
    ("Saroj Mohapatra", "Don Quixote"),
    ("Saroj Mohapatra", "The Scarlet Letter"),
    ("Ritesh Kumar Panda", "Great Expectations"),
    ("Ritesh Kumar Panda", "Don Quixote"),
    ("Ritesh Kumar Panda", "Frankenstein, or, the Modern Prometheus"),
    ("Ritesh Kumar Panda", "The Wind in the Willows"),
    ("Hardeep Mohanty", "Frankenstein, or, the Modern Prometheus"),
    ("Hardeep Mohanty", "The Great Gatsby"),
    ("Deepak Kumar Dash", "The Great Gatsby"),
    ("Deepak Kumar Dash", "Don Quixote"),
    ("Rudra Pratap Padhi", "Great Expectations"),
    ("Rudra Pratap Padhi", "The House of the Seven Gables"),
    ("Rudra Pratap Padhi", "Jane Eyre"),
    ("Swastik Padhi", "Gone with the Wind"),
    ("Swastik Padhi", "Lord of the Flies"),
    ("Chirag Agrawal", "Lord of the Flies"),
    ("Chirag Agrawal", "All Quiet on the Western Front"),
    ("Gantyada Tejesh Kumar", "The Color Purple"),
    ("Gantyada Tejesh Kumar", "Gone with the Wind"),
    ("Shib Narayan Dash", "The Color Purple"),
    ("Shib Narayan Dash", "To the Lighthouse"),
    ("Pranabesh Mishra", "East of Eden"),
    ("Pranabesh Mishra", "To the Lighthouse"),
    ("Raju Soren", "White Fang"),
    ("Raju Soren", "Anna Karenina"),
    ("Suraj Pattnaik", "Anna Karenina"),
    ("Suraj Pattnaik", "Fahrenheit 451"),
    ("Gulam Hyder", "The Magician's Nephew"),
    ("Gulam Hyder", "Anna Karenina"),
    ("Swapnita Singh", "Anna Karenina"),
    ("Swapnita Singh", "Moby Dick"),
    ("Swapnita Singh", "Don Quixote"),
    ("Swapnita Singh", "Alice's Adventures in Wonderland"),
    ("Amir Chand", "Moby Dick"),
    ("Amir Chand", "Don Quixote"),
    ("Amir Chand", "Alice's Adventures in Wonderland"),
    ("Khitish Kumar Pradhan", "Doctor Zhivago"),
    ("Khitish Kumar Pradhan", "Don Quixote"),
    ("Priyambada Acharya", "Doctor Zhivago"),
    ("Priyambada Acharya", "Anna Karenina"),
    ("Sairaj Pattnaik", "Beloved"),
    # rejected: misspelled user and unknown title
    ("Harish Chandra Mohant", "Anna Karenina"),
    ("Hardeep Mohanty", "The Call of the Wilds"),
]

MEDIUM_USERS = [
    "Shreya Bastia",
    "Devansh Bansal",
    "Aditya Sahu",
    "Goutam Kumar Nayak",
    "Shreyash Satyananda Kar",
    "Saroj Mohapatra",
    "Ritesh Kumar Panda",
    "Hardeep Mohanty",
    "Deepak Kumar Dash",
    "Rudra Pratap Padhi",
    "Swastik Padhi",
    "Chirag Agrawal",
    "Gantyada Tejesh Kumar",
    "Shib Narayan Dash",
    "Pranabesh Mishra",
    "Raju Soren",
    "Suraj Pattnaik",
    "Gulam Hyder",
    "Harish Chandra Mohanta",
    "Swapnita Singh",
    "Amir Chand",
    "Khitish Kumar Pradhan",
    "Priyambada Acharya",
    "Sairaj Pattnaik",
]


def build_catalog(
    books: Iterable[str],
    reads: Iterable[Tuple[str, str]],
    users: Optional[Iterable[str]] = None,
) -> Catalog:
    """
    Register every book and user, then record the reads.

    When ``users`` is None the readers named in ``reads`` are registered.
    Reads naming an unregistered user or book are rejected by the catalog.
    """
    reads = list(reads)
    if users is None:
        users = dict.fromkeys(user_id for user_id, _ in reads)

    catalog = Catalog()

    for title in books:
        catalog.register_book(title)

    for user_id in users:
        catalog.register_user(user_id)

    for user_id, title in reads:
        catalog.record_read(user_id, title)

    return catalog


def build_demo_catalog_small() -> Catalog:
    return build_catalog(
        books=["A", "B", "C"],
        reads=[("X", "A"), ("X", "B"), ("Y", "A"), ("Y", "B"), ("Y", "C"), ("Z", "C")],
    )


def build_demo_catalog_medium() -> Catalog:
    return build_catalog(MEDIUM_BOOKS, MEDIUM_READS, MEDIUM_USERS)
