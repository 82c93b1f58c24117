"""Static catalog of Python samples to analyze."""

from typing import List, Optional, Tuple

from pyscope.models import CodeSample

DIFFICULTIES = ("beginner", "intermediate", "advanced")

PYTHON_SAMPLES: Tuple[CodeSample, ...] = (
    CodeSample(
        id="hello-world",
        title="Hello World",
        description="Basic Python program with print statement",
        code='''# Simple Hello World program
def main():
    print("Hello, World!")

if __name__ == "__main__":
    main()''',
        difficulty="beginner",
        concepts=["functions", "print", "main guard"],
    ),
    CodeSample(
        id="variables-types",
        title="Variables and Data Types",
        description="Demonstration of Python variable types and assignments",
        code='''# Variables and data types
name = "Alice"
age = 25
height = 5.6
is_student = True
hobbies = ["reading", "coding", "hiking"]
person_info = {"name": name, "age": age}

print(f"Name: {name}, Type: {type(name)}")
print(f"Age: {age}")
print(f"Hobbies: {hobbies}")
print(person_info)''',
        difficulty="beginner",
        concepts=["variables", "data types", "f-strings", "lists", "dictionaries"],
    ),
    CodeSample(
        id="control-flow",
        title="Control Flow Statements",
        description="If-else statements and conditional logic",
        code='''# Control flow example
def check_grade(score):
    if score >= 90:
        grade = "A"
    elif score >= 80:
        grade = "B"
    elif score >= 70:
        grade = "C"
    else:
        grade = "F"

    return grade

scores = [95, 87, 73, 45]
for score in scores:
    grade = check_grade(score)
    print(f"Score: {score}, Grade: {grade}")''',
        difficulty="beginner",
        concepts=["functions", "conditionals", "loops", "return values"],
    ),
    CodeSample(
        id="loops-iteration",
        title="Loops and Iteration",
        description="Different types of loops in Python",
        code='''# Different loop types
numbers = [1, 2, 3, 4, 5]

for num in numbers:
    print(f"Number: {num}")

for i in range(len(numbers)):
    print(numbers[i])

count = 0
while count < 3:
    print(f"Count: {count}")
    count += 1''',
        difficulty="beginner",
        concepts=["for loops", "while loops", "range", "iteration"],
    ),
    CodeSample(
        id="exception-handling",
        title="Exception Handling",
        description="Try/except blocks and raising errors",
        code='''# Exception handling
def safe_divide(a, b):
    """Divide a by b, returning None on division by zero."""
    try:
        return a / b
    except ZeroDivisionError:
        print("Cannot divide by zero")
        return None

def parse_number(text):
    """Parse text as an integer."""
    try:
        return int(text)
    except:
        return 0

print(safe_divide(10, 2))
print(parse_number("42"))''',
        difficulty="intermediate",
        concepts=["exceptions", "try/except", "error handling"],
    ),
    CodeSample(
        id="classes-oop",
        title="Classes and Object-Oriented Programming",
        description="Class definitions, methods and inheritance",
        code='''# Classes and inheritance
class Animal:
    """Base animal."""

    def __init__(self, name):
        """Store the animal name."""
        self.name = name

    def speak(self):
        """Return the animal sound."""
        return "..."


class Dog(Animal):
    """A dog."""

    def speak(self):
        """Dogs bark."""
        return "Woof"


dog = Dog("Rex")
print(dog.speak())''',
        difficulty="intermediate",
        concepts=["classes", "inheritance", "methods", "OOP"],
    ),
    CodeSample(
        id="file-operations",
        title="File Operations",
        description="Reading and writing files",
        code='''# File operations
def write_lines(path, lines):
    """Write lines to a file."""
    with open(path, "w") as handle:
        for line in lines:
            handle.write(line + "\\n")

def read_lines(path):
    """Read all lines of a file."""
    with open(path) as handle:
        return handle.read().splitlines()

write_lines("notes.txt", ["first", "second"])
print(read_lines("notes.txt"))''',
        difficulty="intermediate",
        concepts=["file I/O", "context managers", "with statement"],
    ),
    CodeSample(
        id="generators-iterators",
        title="Generators and Iterators",
        description="Lazy sequences with yield",
        code='''# Generators
def fibonacci(limit):
    """Yield Fibonacci numbers below limit."""
    a, b = 0, 1
    while a < limit:
        yield a
        a, b = b, a + b

for value in fibonacci(50):
    print(value)''',
        difficulty="advanced",
        concepts=["generators", "yield", "iteration", "lazy evaluation"],
    ),
    CodeSample(
        id="insecure-code",
        title="Insecure Patterns",
        description="Code that exercises the security checks",
        code='''# Insecure patterns
import os
import pickle

def run(command):
    os.system(command)

user_value = input("Expression: ")
result = eval(user_value)
data = pickle.load(open("cache.bin", "rb"))
print(result)''',
        difficulty="advanced",
        concepts=["security", "eval", "deserialization", "command injection"],
    ),
)


def sample_ids() -> List[str]:
    """Identifiers of every sample, in catalog order."""
    return [sample.id for sample in PYTHON_SAMPLES]


def get_sample(sample_id: str) -> Optional[CodeSample]:
    """Look up a sample by id."""
    for sample in PYTHON_SAMPLES:
        if sample.id == sample_id:
            return sample
    return None


def filter_samples(difficulty: str = "all", search: str = "") -> List[CodeSample]:
    """
    Filter the catalog.

    Args:
        difficulty: "all" or one of DIFFICULTIES
        search: Case-insensitive text matched against title, description and concepts

    Returns:
        Matching samples in catalog order
    """
    term = search.lower()
    matches = []
    for sample in PYTHON_SAMPLES:
        if difficulty != "all" and sample.difficulty != difficulty:
            continue
        if term and not (
            term in sample.title.lower()
            or term in sample.description.lower()
            or any(term in concept.lower() for concept in sample.concepts)
        ):
            continue
        matches.append(sample)
    return matches
