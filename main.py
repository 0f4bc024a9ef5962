import logging
import argparse
import sys

from core.config_loader import get_config
from core.preferences import PreferenceForm, build_preference
from core.recommendation import RecommendationService
from database.init_db import init_db
from database.uow import catalog_uow
from etl.csv_import import import_csv, CsvImportError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def cmd_init_db(args) -> int:
    from database.database import engine
    init_db(engine)
    return 0


def cmd_import_csv(args) -> int:
    config = get_config()
    with open(args.path, "r", encoding="utf-8-sig") as f:
        text = f.read()

    try:
        with catalog_uow() as repos:
            report = import_csv(text, repos.internships, config.csv_import)
    except CsvImportError as e:
        logger.error(f"Import failed: {e}")
        return 1

    for error in report.errors:
        logger.warning(f"Row {error.row}: {error.message}")
    for duplicate in report.skipped_duplicates:
        logger.info(f"Skipped duplicate: {duplicate}")
    logger.info(f"Inserted {report.inserted} internships from {args.path}")
    return 0


def cmd_recommend(args) -> int:
    form = PreferenceForm(
        custom_skills=args.skills or "",
        sectors=args.sector or [],
        preferred_locations=args.location or [],
        education=args.education,
    )
    preference = build_preference(form)

    with catalog_uow() as repos:
        service = RecommendationService(
            fetch_active_internships=repos.internships.fetch_active_internships,
            config=get_config().scorer
        )
        results = service.recommend(preference)

    if not results:
        print("No internships available.")
        return 0

    for r in results:
        i = r.internship
        where = "Remote" if i.remote else (i.city or "-")
        skills = ", ".join(r.matched_skills) or "-"
        print(f"{r.score:>4}  {i.title} @ {i.org_name} [{i.sector}] {where}  matched: {skills}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="InternLink catalog and recommendation tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_init = subparsers.add_parser("init-db", help="Create database tables")
    p_init.set_defaults(func=cmd_init_db)

    p_import = subparsers.add_parser("import-csv", help="Bulk import internships from a CSV file")
    p_import.add_argument("path", help="CSV file path")
    p_import.set_defaults(func=cmd_import_csv)

    p_rec = subparsers.add_parser("recommend", help="Print recommendations for ad-hoc preferences")
    p_rec.add_argument("--skills", help="Comma separated skills, e.g. 'Python, SQL'")
    p_rec.add_argument("--sector", action="append", help="Sector of interest (repeatable)")
    p_rec.add_argument("--location", action="append", help="Preferred city or 'Remote' (repeatable)")
    p_rec.add_argument("--education", help="Education level")
    p_rec.set_defaults(func=cmd_recommend)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
