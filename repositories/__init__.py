"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for one table
(`about`, `contact`, `projects`). Rows are normalized into domain models
here, and every committed write is followed by page revalidation.
"""
