# core/permissions.py

from models.enums import Role

ADMIN = Role.admin
INSTITUTE_ADMIN = Role.institute_admin
ACCOUNTANT = Role.accountant
ACADEMIC = Role.academic

POLICY_VERSION = "2026.10.1"


# ============================================
# CENTRALIZED RESOURCE → PERMISSIONS MAP
# ============================================
# Every resource lists all six actions. An empty list means nobody.
# There is no admin bypass: admin grants are written out per entry.
#
# Tab order matters: the first tab a role can see becomes its
# default tab, so put the primary tab of each module first.
RESOURCE_PERMISSIONS = {

    # =====================================================
    # STUDENTS
    # =====================================================
    "students": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN],
            "edit": [ADMIN, INSTITUTE_ADMIN],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT, ACADEMIC],
            "export": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            "import": [ADMIN, INSTITUTE_ADMIN],
        },
        "ui": {
            "tabs": {
                # ACCOUNTANT does not map sections
                "section-mapping": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
                "enrollments": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT, ACADEMIC],
                "transport": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT, ACADEMIC],
                "promotion-dropout": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT, ACADEMIC],
            },
            "sections": {
                "personal-details": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT, ACADEMIC],
                "fee-details": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            },
            "buttons": {
                # Transport tab is read-only below branch admin
                "transport-edit": [ADMIN, INSTITUTE_ADMIN],
                "transport-delete": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },

    # =====================================================
    # RESERVATIONS
    # =====================================================
    "reservations": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN],
            "edit": [ADMIN, INSTITUTE_ADMIN],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            "export": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            "import": [],
        },
        "ui": {
            "tabs": {
                "all": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
                "status": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            },
            "buttons": {
                "reservation-delete": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },

    # =====================================================
    # FEES
    # =====================================================
    "fees": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN],
            "edit": [ADMIN, INSTITUTE_ADMIN],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            "export": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            "import": [],
        },
    },

    # =====================================================
    # ATTENDANCE
    # =====================================================
    "attendance": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "edit": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "export": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "import": [ADMIN, INSTITUTE_ADMIN],
        },
    },

    # =====================================================
    # MARKS — ACADEMIC gets marks/tests/student views, no reports
    # =====================================================
    "marks": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "edit": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "export": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "import": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
        },
        "ui": {
            "tabs": {
                "exam-marks": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
                "test-marks": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
                "student-views": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
                "reports": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },

    # =====================================================
    # ADMISSIONS
    # =====================================================
    "admissions": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN],
            "edit": [ADMIN, INSTITUTE_ADMIN],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT, ACADEMIC],
            "export": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            "import": [],
        },
        "ui": {
            "tabs": {
                "admissions": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT, ACADEMIC],
                # Confirmed reservations are hidden from ACADEMIC
                "reservations": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            },
        },
    },

    # =====================================================
    # FINANCIAL REPORTS
    # =====================================================
    "financial_reports": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN],
            "edit": [ADMIN, INSTITUTE_ADMIN],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            "export": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            "import": [],
        },
        "ui": {
            "tabs": {
                "expenditure": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            },
            "buttons": {
                # ACCOUNTANT sees expenditure but cannot change it
                "expenditure-edit": [ADMIN, INSTITUTE_ADMIN],
                "expenditure-delete": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },

    # =====================================================
    # INCOME
    # =====================================================
    "income": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN],
            "edit": [ADMIN, INSTITUTE_ADMIN],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            "export": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            "import": [],
        },
    },

    # =====================================================
    # EXPENDITURE
    # =====================================================
    "expenditure": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN],
            "edit": [ADMIN, INSTITUTE_ADMIN],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            "export": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            "import": [],
        },
        "ui": {
            "buttons": {
                "expenditure-edit": [ADMIN, INSTITUTE_ADMIN],
                "expenditure-delete": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },

    # =====================================================
    # ANNOUNCEMENTS
    # =====================================================
    "announcements": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN],
            "edit": [ADMIN, INSTITUTE_ADMIN],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACADEMIC, ACCOUNTANT],
            "export": [ADMIN, INSTITUTE_ADMIN],
            "import": [],
        },
    },

    # =====================================================
    # USER MANAGEMENT — nobody deletes users from the UI
    # =====================================================
    "users": {
        "actions": {
            "create": [INSTITUTE_ADMIN, ADMIN],
            "edit": [INSTITUTE_ADMIN, ADMIN],
            "delete": [],
            "view": [INSTITUTE_ADMIN, ADMIN],
            "export": [INSTITUTE_ADMIN, ADMIN],
            "import": [],
        },
        "ui": {
            "tabs": {
                "overview": [INSTITUTE_ADMIN, ADMIN],
                "roles": [INSTITUTE_ADMIN, ADMIN],
                "audit": [INSTITUTE_ADMIN, ADMIN],
            },
        },
    },

    # =====================================================
    # EMPLOYEES
    # =====================================================
    "employees": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN],
            "edit": [ADMIN, INSTITUTE_ADMIN],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT, ACADEMIC],
            "export": [ADMIN, INSTITUTE_ADMIN],
            "import": [ADMIN, INSTITUTE_ADMIN],
        },
        "ui": {
            "buttons": {
                "employee-edit": [ADMIN, INSTITUTE_ADMIN],
                "employee-delete": [ADMIN, INSTITUTE_ADMIN],
                "employee-update-status": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },

    # =====================================================
    # EMPLOYEE LEAVES
    # =====================================================
    "employee_leaves": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN],
            "edit": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT, ACADEMIC],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT, ACADEMIC],
            "export": [ADMIN, INSTITUTE_ADMIN],
            "import": [],
        },
        "ui": {
            "buttons": {
                "leave-approve": [ADMIN, INSTITUTE_ADMIN],
                "leave-reject": [ADMIN, INSTITUTE_ADMIN],
                "leave-delete": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },

    # =====================================================
    # EMPLOYEE ADVANCES
    # =====================================================
    "employee_advances": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            "edit": [ADMIN, INSTITUTE_ADMIN],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            "export": [ADMIN, INSTITUTE_ADMIN],
            "import": [],
        },
        "ui": {
            "buttons": {
                "advance-edit": [ADMIN, INSTITUTE_ADMIN],
                "advance-delete": [ADMIN, INSTITUTE_ADMIN],
                "advance-change-status": [ADMIN, INSTITUTE_ADMIN],
                "advance-update-amount": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },

    # =====================================================
    # EMPLOYEE ATTENDANCE
    # =====================================================
    "employee_attendance": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "edit": [ADMIN, INSTITUTE_ADMIN],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "export": [ADMIN, INSTITUTE_ADMIN],
            "import": [ADMIN, INSTITUTE_ADMIN],
        },
        "ui": {
            "buttons": {
                "attendance-edit": [ADMIN, INSTITUTE_ADMIN],
                "attendance-delete": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },

    # =====================================================
    # PAYROLL
    # =====================================================
    "payroll": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN],
            "edit": [ADMIN, INSTITUTE_ADMIN],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN],
            "export": [ADMIN, INSTITUTE_ADMIN],
            "import": [],
        },
    },

    # =====================================================
    # TRANSPORT
    # =====================================================
    "transport": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN],
            "edit": [ADMIN, INSTITUTE_ADMIN],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACCOUNTANT],
            "export": [ADMIN, INSTITUTE_ADMIN],
            "import": [],
        },
    },

    # =====================================================
    # REPORTS — read-only module
    # =====================================================
    "reports": {
        "actions": {
            "create": [],
            "edit": [],
            "delete": [],
            "view": [ADMIN, INSTITUTE_ADMIN, ACADEMIC, ACCOUNTANT],
            "export": [ADMIN, INSTITUTE_ADMIN, ACADEMIC, ACCOUNTANT],
            "import": [],
        },
    },

    # =====================================================
    # CLASSES
    # =====================================================
    "classes": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN],
            "edit": [ADMIN, INSTITUTE_ADMIN],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "export": [ADMIN, INSTITUTE_ADMIN],
            "import": [],
        },
        "ui": {
            "buttons": {
                "class-add": [ADMIN, INSTITUTE_ADMIN],
                "class-edit": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },

    # =====================================================
    # SUBJECTS — ACADEMIC can add and edit, not delete
    # =====================================================
    "subjects": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "edit": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "export": [ADMIN, INSTITUTE_ADMIN],
            "import": [],
        },
        "ui": {
            "buttons": {
                "subject-add": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
                "subject-edit": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
                "subject-delete": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },

    # =====================================================
    # SECTIONS
    # =====================================================
    "sections": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "edit": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "export": [ADMIN, INSTITUTE_ADMIN],
            "import": [],
        },
        "ui": {
            "buttons": {
                "section-delete": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },

    # =====================================================
    # TEACHERS
    # =====================================================
    "teachers": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "edit": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "export": [ADMIN, INSTITUTE_ADMIN],
            "import": [],
        },
        "ui": {
            "buttons": {
                # Teacher assignments subtab
                "teacher-assignment-add-subject": [ADMIN, INSTITUTE_ADMIN],
                "teacher-assignment-delete-subject": [ADMIN, INSTITUTE_ADMIN],
                # Class teachers subtab
                "class-teacher-assign": [ADMIN, INSTITUTE_ADMIN],
                "class-teacher-delete": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },

    # =====================================================
    # EXAMS
    # =====================================================
    "exams": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN],
            "edit": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "export": [ADMIN, INSTITUTE_ADMIN],
            "import": [],
        },
        "ui": {
            "buttons": {
                "exam-add": [ADMIN, INSTITUTE_ADMIN],
                "exam-delete": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },

    # =====================================================
    # TESTS
    # =====================================================
    "tests": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "edit": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "export": [ADMIN, INSTITUTE_ADMIN],
            "import": [],
        },
        "ui": {
            "buttons": {
                "test-delete": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },

    # =====================================================
    # GRADES
    # =====================================================
    "grades": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "edit": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "export": [ADMIN, INSTITUTE_ADMIN],
            "import": [],
        },
        "ui": {
            "buttons": {
                "grade-delete": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },

    # =====================================================
    # ACADEMIC YEARS
    # =====================================================
    "academic_years": {
        "actions": {
            "create": [ADMIN, INSTITUTE_ADMIN],
            "edit": [ADMIN, INSTITUTE_ADMIN],
            "delete": [ADMIN, INSTITUTE_ADMIN],
            "view": [ADMIN, INSTITUTE_ADMIN, ACADEMIC],
            "export": [ADMIN, INSTITUTE_ADMIN],
            "import": [],
        },
        "ui": {
            "buttons": {
                "academic-year-add": [ADMIN, INSTITUTE_ADMIN],
                "academic-year-edit": [ADMIN, INSTITUTE_ADMIN],
                "academic-year-delete": [ADMIN, INSTITUTE_ADMIN],
            },
        },
    },
}
