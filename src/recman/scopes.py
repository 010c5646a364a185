"""Scope names and default field projections for the Recman API.

Every operation on :class:`~recman.client.RecmanApi` maps to one ``scope``
query parameter. Scopes that support projection are sent with the default
field list below unless the caller passes its own ``fields``.
"""

from __future__ import annotations

from recman.models import LocationField

BRANCH_LIST = "branch_list"
BRANCH_CATEGORY_LIST = "branch_category_list"
SECTOR_LIST = "sector_list"
EXTENT_LIST = "extent_list"
LOCATION = "location"
JOB_POST = "job_post"
DEPARTMENT = "department"
CORPORATION = "corporation"
CANDIDATE_LIST = "candidate_list"
CANDIDATE_ATTRIBUTE_LIST = "candidate_attribute_list"
CANDIDATE_ATTRIBUTE = "candidate_attribute"
LANGUAGE_LIST = "language_list"
USER = "user"
USER_TAG_LIST = "user_tag_list"

VALID_LOCATION_FIELDS: tuple[str, ...] = tuple(f.value for f in LocationField)

# The API pages the candidate list at this many entries.
CANDIDATE_PAGE_SIZE = 5000

JOB_POST_FIELDS: tuple[str, ...] = (
    "name", "ingress", "body", "logo", "from_date", "to_date", "title", "place",
    "deadline", "facebook", "twitter", "webpage", "num_positions", "video",
    "external_ats", "created", "updated", "position_start", "salary",
    "company_name", "address1", "address2", "city", "postal_code",
    "country", "keywords", "contact_persons", "country_id", "region_id", "city_id",
    "first_branch", "first_branch_category_id", "first_branch_id",
    "second_branch_category_id", "second_branch_id", "sector_id", "extent_id",
)

DEPARTMENT_FIELDS: tuple[str, ...] = (
    "name", "address1", "address2",
    "postal_code", "city", "country",
    "phone", "email", "fax", "logo",
    "number", "corporation_id",
)

CORPORATION_FIELDS: tuple[str, ...] = (
    "name", "phone", "email", "logo", "footer_logo", "about",
    "webpage", "facebook", "linkedin", "twitter", "rm_page",
)

CANDIDATE_FIELDS: tuple[str, ...] = (
    "candidateID", "firstName", "lastName", "email", "profilePicture",
    "mobilePhone", "officePhone", "homePhone", "facebook", "linkedin",
    "twitter", "address1", "address2", "postalCode", "city", "country",
)

LANGUAGE_FIELDS: tuple[str, ...] = ("name",)

USER_FIELDS: tuple[str, ...] = (
    "first_name", "last_name", "title", "mobile_phone",
    "office_phone", "email", "image", "facebook",
    "linkedin", "twitter", "corporation_id", "department_id",
)

USER_TAG_FIELDS: tuple[str, ...] = ("name",)
