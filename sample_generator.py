from dataclasses import asdict, dataclass, field

import numpy as np
import pandas as pd

from record_shapes import declared_fields


@dataclass
class Student:
    name: str = field(default="", metadata={"parquet": "name=name, type=BYTE_ARRAY, convertedtype=UTF8"})
    age: int = field(default=0, metadata={"parquet": "name=age, type=INT32"})
    id: int = field(default=0, metadata={"parquet": "name=id, type=INT64"})
    weight: float = field(default=0.0, metadata={"parquet": "name=weight, type=FLOAT"})
    gpa: float = field(default=0.0, metadata={"parquet": "name=gpa, type=DOUBLE"})
    active: bool = field(default=False, metadata={"parquet": "name=active, type=BOOLEAN"})
    courses: list = field(default_factory=list, metadata={"parquet": "name=courses, type=LIST"})


def make_students(num_rows: int) -> list[Student]:
    students = []
    for i in range(num_rows):
        students.append(
            Student(
                name=f"Student {i + 1}",
                age=18 + i % 10,
                id=1000 + i,
                weight=50.5 + i * 0.5,
                gpa=3.0 + (i % 10) / 10.0,
                active=i % 2 == 0,
                courses=[f"Course {i % 5 + 1}", f"Course {(i + 2) % 5 + 1}"],
            )
        )
    return students


def students_frame(students) -> pd.DataFrame:
    labels = {f.identifier: f.label for f in declared_fields(Student)}
    df = pd.DataFrame([asdict(s) for s in students], columns=list(labels))
    df = df.rename(columns=labels)
    return df.astype(
        {"age": np.int32, "id": np.int64, "weight": np.float32, "gpa": np.float64, "active": bool}
    )


def generate_sample_parquet(path="sample.parquet", num_rows=10) -> str:
    df = students_frame(make_students(num_rows))
    df.to_parquet(path, engine="pyarrow", compression="snappy", index=False)
    return path
