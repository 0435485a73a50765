import time

import dearpygui.dearpygui as dpg

from clothsim import constants


def _make_callbacks(shared):
    def gravity_cb(sender, app_data, user_data):
        shared['gravity'] = float(app_data)
    def wind_cb(sender, app_data, user_data):
        shared['wind'] = float(app_data)
    def iters_cb(sender, app_data, user_data):
        shared['constraint_iterations'] = int(app_data)
    def pause_cb():
        shared['toggle_pause'] = True
    def reset_cb():
        shared['reset_world'] = True
    def exit_cb():
        shared['__exit__'] = True
    return gravity_cb, wind_cb, iters_cb, pause_cb, reset_cb, exit_cb


def run_gui(shared):
    """
    Run DearPyGui in its own process. Writes values into `shared`.
    """
    dpg.create_context()

    gravity_cb, wind_cb, iters_cb, pause_cb, reset_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="Cloth Controls", tag="controls_window", width=380, height=300):
        dpg.add_text("Forces")
        dpg.add_slider_float(label="Gravity", tag="gravity_slider",
                             default_value=float(shared.get('gravity', -constants.GRAVITY[1])),
                             min_value=0.0, max_value=2.0, callback=gravity_cb)
        dpg.add_slider_float(label="Crosswind", tag="wind_slider",
                             default_value=float(shared.get('wind', constants.WIND_STRENGTH)),
                             min_value=0.0, max_value=1.0, callback=wind_cb)
        dpg.add_separator()
        dpg.add_text("Constraint iterations")
        dpg.add_slider_int(label="Iterations", tag="iters_slider",
                           default_value=int(shared.get('constraint_iterations', constants.CONSTRAINTS_ITER)),
                           min_value=0, max_value=50, callback=iters_cb)
        dpg.add_separator()
        dpg.add_button(label="Pause / Toggle", callback=lambda s, a, u: pause_cb())
        dpg.add_button(label="Reset Cloth", callback=lambda s, a, u: reset_cb())
        dpg.add_button(label="Exit", callback=lambda s, a, u: exit_cb())
        dpg.add_spacer()
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")

    dpg.create_viewport(title='Cloth Controls', width=400, height=340)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            status = (f"tick={shared.get('tick', 0)}, pinned={shared.get('pinned', 0)}, "
                      f"error={float(shared.get('constraint_error', 0.0)):.4f}")
            dpg.set_value("status_text", status)
            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()
