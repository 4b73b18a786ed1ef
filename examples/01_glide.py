"""
Example 01: Glide - moving a delay tap without clicks

Renders a 440 Hz tone through a delay line that glides from 10 ms to 25 ms
over half a second, once with the sinc multi-tap line and once with a naive
crossfade between two fixed taps, and compares how much each output jumps
from sample to sample.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and sincdelay contributors
MIT License
"""

import numpy as np

import sincdelay as sd

SAMPLE_RATE = 44100
sd.set_sample_rate(SAMPLE_RATE)

DURATION_SECONDS = 1.0
GLIDE_SECONDS = 0.5

duration_samples = int(DURATION_SECONDS * SAMPLE_RATE)
glide_samples = int(GLIDE_SECONDS * SAMPLE_RATE)
tau1 = float(sd.ms_to_samples(10.0, SAMPLE_RATE))
tau2 = float(sd.ms_to_samples(25.0, SAMPLE_RATE))

print("=== sincdelay Example 01: Glide ===", flush=True)
print(f"tau1={tau1:.1f} samples, tau2={tau2:.1f} samples, glide={glide_samples} samples")

t = np.arange(duration_samples) / SAMPLE_RATE
tone_stream = sd.ArrayPE(0.5 * np.sin(2 * np.pi * 440.0 * t))
alpha_stream = sd.RampPE(0.0, 1.0, duration=glide_samples, extend_mode=sd.ExtendMode.HOLD_LAST)

# --- Part 1: sinc multi-tap glide ---
for k in (0, 2, 8):
    line_stream = sd.SincDelayPE(
        tone_stream, tau1=tau1, tau2=tau2, alpha=alpha_stream, k=k, max_delay_seconds=0.5
    )
    wet = line_stream.render(0, duration_samples).mono()
    print(f"K={k:2d} ({2 * k + 2:2d} taps): peak={np.max(np.abs(wet)):.3f}, "
          f"max step={np.max(np.abs(np.diff(wet))):.4f}", flush=True)

# --- Part 2: naive crossfade of two fixed taps ---
early = sd.SincDelayPE(tone_stream, tau1=tau1, tau2=tau1, max_delay_seconds=0.5)
late = sd.SincDelayPE(tone_stream, tau1=tau2, tau2=tau2, max_delay_seconds=0.5)
fade = alpha_stream.render(0, duration_samples).mono()
naive = (1.0 - fade) * early.render(0, duration_samples).mono() + fade * late.render(0, duration_samples).mono()
print(f"crossfade:        peak={np.max(np.abs(naive)):.3f}, "
      f"min level mid-glide={np.min(np.abs(naive[glide_samples // 2 - 200:glide_samples // 2 + 200])):.3f}")
