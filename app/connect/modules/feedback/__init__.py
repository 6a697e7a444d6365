"""
Feedback and meeting requests from members and leaders.

Workflow: pending -> in_progress -> resolved. A response may be attached at
any point; its timestamp comes from the store clock.
"""
