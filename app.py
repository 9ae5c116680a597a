import gradio as gr

from workflow_extractor.config import load_config
from workflow_extractor.flattening import OUTPUT_COLUMNS
from workflow_extractor.handlers import (
    export_csv_handler,
    export_xlsx_handler,
    load_workflows_with_preview,
)
from workflow_extractor.logger import setup_logging

config = load_config()
setup_logging(config.log_level)

# Runs in the browser; the theme is presentation state only.
TOGGLE_THEME_JS = """
() => {
    document.body.classList.toggle('dark');
}
"""

# --- UI Definition ---
with gr.Blocks(title="Workflow JSON Converter") as demo:
    with gr.Row():
        gr.Markdown("# Workflow JSON → CSV/XLSX Converter")
        theme_btn = gr.Button("Toggle Dark Mode", size="sm")
    gr.Markdown("Upload a workflow JSON file or a ZIP of workflow JSON files. One row is produced per parameter.")

    # State
    rows_state = gr.State(value=[])

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON or ZIP File", file_types=[".json", ".zip"])
            status_msg = gr.Textbox(label="Status", interactive=False)
            row_count = gr.Textbox(label="Row Count", interactive=False)

        # Right Panel: Export
        with gr.Column(scale=1):
            gr.Markdown("### 2. Export")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder=config.output_stem)
            with gr.Row():
                csv_btn = gr.Button("Download CSV", variant="primary")
                xlsx_btn = gr.Button("Download XLSX")
            download_output = gr.File(label="Download Result")

    gr.Markdown("### 3. Extracted Rows")
    rows_table = gr.Dataframe(headers=OUTPUT_COLUMNS, interactive=False, wrap=True)

    file_input.upload(
        fn=load_workflows_with_preview,
        inputs=[file_input],
        outputs=[rows_state, status_msg, row_count, rows_table],
    )

    csv_btn.click(
        fn=export_csv_handler,
        inputs=[rows_state, output_filename],
        outputs=[download_output, status_msg],
    )

    xlsx_btn.click(
        fn=export_xlsx_handler,
        inputs=[rows_state, output_filename],
        outputs=[download_output, status_msg],
    )

    theme_btn.click(fn=None, inputs=None, outputs=None, js=TOGGLE_THEME_JS)

if __name__ == "__main__":
    demo.launch()
