"""Shared workflow fixtures."""

import pytest


@pytest.fixture
def job_form_parameter():
    return {
        "label": "Full Name",
        "type": "SINGLE_LINE",
        "mandatory": True,
        "verificationType": "SELF",
    }


@pytest.fixture
def sample_workflow(job_form_parameter):
    return {
        "parameterRequests": [job_form_parameter],
        "stageRequests": [
            {
                "name": "Review",
                "taskRequests": [
                    {
                        "name": "Approve",
                        "parameterRequests": [
                            {
                                "label": "Status",
                                "type": "SINGLE_SELECT",
                                "mandatory": False,
                                "verificationType": "BOTH",
                                "data": [{"name": "Yes"}, {"name": "No"}],
                                "rules": [{"input": ["Yes"], "show": {"parameters": ["Comment"]}}],
                            },
                            {
                                "label": "Comment",
                                "type": "MULTI_LINE",
                            },
                        ],
                    },
                    {"name": "Empty Task"},
                ],
            },
            {
                "name": "Close",
                "taskRequests": [
                    {
                        "name": "Sign Off",
                        "parameterRequests": [
                            {
                                "label": "Checks",
                                "type": "CHECKLIST",
                                "data": {"choices": [{"name": "Tools"}, {"name": "Area"}]},
                            }
                        ],
                    }
                ],
            },
        ],
    }
