"""Business metrics for the Task Manager service.

Defines OpenTelemetry metrics for the Task aggregate. Without a configured
MeterProvider these instruments are no-ops.
"""

from opentelemetry import metrics

meter = metrics.get_meter(__name__)

# =============================================================================
# TASK METRICS
# =============================================================================

tasks_created = meter.create_counter(
    name="task_manager.tasks.created",
    description="Total tasks created",
    unit="1",
)

tasks_updated = meter.create_counter(
    name="task_manager.tasks.updated",
    description="Total task updates (details, priority, due date or status)",
    unit="1",
)

tasks_completed = meter.create_counter(
    name="task_manager.tasks.completed",
    description="Total tasks completed",
    unit="1",
)

tasks_deleted = meter.create_counter(
    name="task_manager.tasks.deleted",
    description="Total tasks deleted",
    unit="1",
)

tasks_failed = meter.create_counter(
    name="task_manager.tasks.failed",
    description="Total task operation failures",
    unit="1",
)

task_processing_time = meter.create_histogram(
    name="task_manager.task.processing_time",
    description="Time to process task operations",
    unit="ms",
)
