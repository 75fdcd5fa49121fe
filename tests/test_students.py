import pytest

from treelab.bst import BST
from treelab.students import Student, StudentIds


def test_describe_format():
    student = Student("Ada", "Lovelace", 36, 4)
    assert student.describe() == "Student ID: 4\tFirst: Ada\tLast: Lovelace\tAge: 36"


def test_student_id_is_key():
    student = Student("Alan", "Turing", 41, 9)
    assert student.student_id == 9
    assert student.key == 9


def test_names_can_be_changed():
    student = Student("Grace", "Hopper", 85, 2)
    student.first = "Amazing"
    student.last = "Grace"
    assert student.describe().startswith("Student ID: 2\tFirst: Amazing\tLast: Grace")


def test_default_student():
    student = Student()
    assert (student.first, student.last, student.age, student.student_id) == ("", "", 0, 0)


def test_negative_age_rejected():
    with pytest.raises(ValueError):
        Student("A", "B", -1, 1)
    with pytest.raises(ValueError):
        StudentIds().create("A", "B", -5)


def test_ids_start_at_one_and_increase():
    ids = StudentIds()
    assert [ids.next_id() for _ in range(3)] == [1, 2, 3]


def test_custom_start():
    ids = StudentIds(start=0)
    first = ids.create("X", "Y", 20)
    second = ids.create("Z", "W", 21)
    assert first.student_id == 0
    assert second.student_id == 1


def test_students_in_tree_found_by_id():
    ids = StudentIds()
    tree = BST()
    people = [("Ann", "Lee", 20), ("Bob", "Ray", 22), ("Cy", "Doe", 19)]
    created = [ids.create(*p) for p in people]
    for student in created:
        tree.insert(student)
    assert tree.search(2) is created[1]
    assert tree.minimum() is created[0]
    assert tree.maximum() is created[2]
    lines = tree.walk().splitlines()
    assert lines == [s.describe() for s in created]
    tree.delete(tree.search(2))
    assert tree.search(2) is None