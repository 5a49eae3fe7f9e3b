"""CLI script to insert courses into the backend DB.

Usage: python scripts/seed_courses.py "Algebra I" "Biology" [...]
       python scripts/seed_courses.py --file courses.txt
"""
import sys
import argparse
import pathlib
# Ensure `backend/` is on sys.path so `school_api` imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from sqlmodel import Session
from school_api.database import engine, create_db_and_tables
from school_api.repositories import CourseRepository


def read_titles(titles, path=None):
    """Collect course titles from the CLI arguments and an optional file.

    The file holds one title per line; blank lines are skipped.
    """
    out = [t.strip() for t in titles if t.strip()]
    if path is not None:
        lines = pathlib.Path(path).read_text(encoding='utf-8').splitlines()
        out.extend(line.strip() for line in lines if line.strip())
    return out


def main(argv=None):
    parser = argparse.ArgumentParser(description='Insert courses so teachers/students can be linked to them')
    parser.add_argument('titles', nargs='*', help='course titles')
    parser.add_argument('--file', help='text file with one course title per line')
    args = parser.parse_args(argv)
    titles = read_titles(args.titles, args.file)
    if not titles:
        print('No course titles given')
        return 1
    create_db_and_tables()
    with Session(engine) as session:
        courses = CourseRepository(session).create_many(titles)
    for c in courses:
        print(f'{c.id}\t{c.title}')
    print(f'Created {len(courses)} course(s)')
    return 0


if __name__ == '__main__':
    sys.exit(main())
